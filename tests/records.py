"""Record types shared by service and CLI tests.

Records live at module level so their annotations resolve and the CLI
can import them as ``tests.records:Name``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from structconv.domain.types import Uint16


@dataclass
class Database:
    host: str = "localhost"
    port: Uint16 = 5432


@dataclass
class AppConfig:
    name: str = field(
        default="",
        metadata={
            "env": "APP_NAME,required",
            "queryparam": ",required",
            "form": ",required",
            "map": ",required",
        },
    )
    debug: bool = False
    workers: int = 1
    ratio: float = 0.0
    db: Database = field(default_factory=Database)
    tags: list[str] = field(default_factory=list)
    secret: str = field(
        default="",
        metadata={"env": "-", "queryparam": "-", "form": "-", "map": "-"},
    )


@dataclass
class Search:
    query: str = field(default="", metadata={"queryparam": "q,required", "form": "q"})
    page: int = 1
    exact: bool = False


@dataclass(frozen=True)
class FrozenConfig:
    name: str = ""


@dataclass
class Loop:
    name: str
    link: Loop


NOT_A_RECORD = {"name": "plain dict"}
