"""ETL run control types.

Run states, fetch outcomes and the final run result.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from movie_extract.etl.errors import TransportFailure
from movie_extract.etl.types.movie import MovieRecord


class RunState(str, Enum):
    """States of the listing traversal."""

    FETCHING_LIST = "fetching_list"
    PARSING_ITEMS = "parsing_items"
    ENRICHING = "enriching"
    DONE = "done"
    ABORTED = "aborted"


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one GET: a body or a transport failure."""

    body: str | None = None
    failure: TransportFailure | None = None

    @property
    def ok(self) -> bool:
        """True when the request produced a body."""
        return self.failure is None and self.body is not None


@dataclass
class RunResult:
    """Records collected by one extraction run.

    Attributes:
        records: Records in page-then-item discovery order.
        state: Terminal state (DONE or ABORTED).
        pages_fetched: Listing pages successfully fetched.
        stats: Extraction metrics snapshot.
    """

    records: list[MovieRecord] = field(default_factory=list)
    state: RunState = RunState.DONE
    pages_fetched: int = 0
    stats: dict[str, Any] = field(default_factory=dict)

    @property
    def aborted(self) -> bool:
        """True when a listing page failure stopped the run."""
        return self.state is RunState.ABORTED
