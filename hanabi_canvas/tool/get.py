"""Hanabi-canvas get action."""

import logging
from argparse import (
    ArgumentParser,
    _SubParsersAction as SubParsersAction,
)
from pathlib import Path
from typing import cast

from hanabi_canvas import persistence
from hanabi_canvas.config import read_challenge_config
from hanabi_canvas.exceptions import InputException
from hanabi_canvas.records import ArtworkRecord, RequestRecord
from hanabi_canvas.store import InMemoryRecordStore

from .format import print_records


_LOGGER = logging.getLogger(__name__)

OUTPUT_CHOICES = ["table", "yaml", "json"]


def _add_output_flag(args: ArgumentParser) -> None:
    args.add_argument(
        "--output",
        "-o",
        choices=OUTPUT_CHOICES,
        default="table",
        help="Output format of the command",
    )


async def _load_text(path: Path) -> str:
    if (content := await persistence.async_load_from_file(path)) is None:
        raise InputException(f"Unable to read save file {path}")
    return content


class GetArtworksAction:
    """Get details about saved artworks."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "artworks",
                aliases=["artwork", "art"],
                help="Get saved artworks",
                description="Print information about the artworks in a save file",
            ),
        )
        args.add_argument(
            "--file",
            "-f",
            type=Path,
            required=True,
            help="Path to an exported artworks file",
        )
        args.add_argument(
            "--liked",
            action="store_true",
            help="Only print artworks that have been liked",
        )
        _add_output_flag(args)
        args.set_defaults(cls=cls)
        return args

    async def run(  # type: ignore[no-untyped-def]
        self,
        file: Path,
        liked: bool,
        output: str,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Async Action implementation."""
        store = InMemoryRecordStore()
        store.set_all_artworks(persistence.import_artworks(await _load_text(file)))
        artworks: list[ArtworkRecord] = [
            artwork
            for artwork in store.get_all_artworks()
            if not liked or artwork.is_liked
        ]
        _LOGGER.debug("Loaded %d artworks from %s", store.artwork_count, file)
        rows = [
            {
                "id": artwork.id,
                "name": artwork.name,
                "size": f"{artwork.width}x{artwork.height}",
                "pixels": len(artwork.pixels),
                "liked": artwork.is_liked,
            }
            for artwork in artworks
        ]
        print_records(
            output,
            ["id", "name", "size", "pixels", "liked"],
            rows,
            [artwork.to_dict() for artwork in artworks],
        )


class GetRequestsAction:
    """Get details about challenge requests."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "requests",
                aliases=["request", "req"],
                help="Get challenge requests",
                description=(
                    "Print information about challenge requests from a challenge "
                    "config and/or an exported requests file"
                ),
            ),
        )
        args.add_argument(
            "--file",
            "-f",
            type=Path,
            default=None,
            help="Path to an exported requests file, replaces any predefined requests",
        )
        args.add_argument(
            "--config",
            type=Path,
            default=None,
            help="Path to a challenge config with predefined requests",
        )
        args.add_argument(
            "--active",
            action="store_true",
            help="Only print requests that are not completed",
        )
        _add_output_flag(args)
        args.set_defaults(cls=cls)
        return args

    async def run(  # type: ignore[no-untyped-def]
        self,
        file: Path | None,
        config: Path | None,
        active: bool,
        output: str,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Async Action implementation."""
        if file is None and config is None:
            raise InputException("One of --file or --config is required")
        challenge_config = read_challenge_config(config) if config else None
        store = InMemoryRecordStore(config=challenge_config)
        if file is not None:
            store.set_all_requests(persistence.import_requests(await _load_text(file)))
        requests: list[RequestRecord] = list(
            store.get_active_requests() if active else store.get_all_requests()
        )
        rows = [
            {
                "id": request.id,
                "prompt": request.prompt,
                "constraints": ",".join(str(c.type) for c in request.constraints)
                or "-",
                "completed": request.is_completed,
            }
            for request in requests
        ]
        print_records(
            output,
            ["id", "prompt", "constraints", "completed"],
            rows,
            [request.to_dict() for request in requests],
        )


class GetAction:
    """Hanabi-canvas get action."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "get",
                help="Print information about saved records",
                description="Print information about saved artworks and requests",
            ),
        )
        subcmds = args.add_subparsers(
            title="Available commands",
            required=True,
        )
        GetArtworksAction.register(subcmds)
        GetRequestsAction.register(subcmds)
        args.set_defaults(cls=cls)
        return args

    async def run(  # type: ignore[no-untyped-def]
        self,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Async Action implementation."""
        # No-op given subcommands are always the dispatch target
