"""
Dashboard State

Explicit application state for a profiling session. A state is immutable;
every transition returns a new state, so callers thread it through
instead of keeping module-level globals.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .charts.builder import ChartBuilder, ChartSpec
from .cleaning.cleaner import CleaningStrategy, DataCleaner
from .config import Config
from .insights.prompts import build_insight_prompt
from .models import ColumnProfile, Table
from .profiler.profiler import TableProfiler
from .reporting.report import filter_rows
from .utils.logging_utils import get_logger

logger = get_logger(__name__)


class Tab(str, Enum):
    UPLOAD = "upload"
    CLEAN = "clean"
    VISUALIZE = "visualize"
    DASHBOARD = "dashboard"
    AI = "ai"


# Tabs that only make sense once a table is loaded
_NEEDS_RAW = {Tab.CLEAN}
_NEEDS_CLEANED = {Tab.VISUALIZE, Tab.DASHBOARD, Tab.AI}


class ChatRole(str, Enum):
    USER = "user"
    AI = "ai"


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: ChatRole
    content: str
    timestamp: datetime = Field(default_factory=datetime.now)


class DashboardState(BaseModel):
    """
    Everything the dashboard shows for one uploaded file.

    Example:
        >>> state = DashboardState().load_table("people.csv", rows)
        >>> state.active_tab
        <Tab.CLEAN: 'clean'>
        >>> state = state.apply_cleaning().set_search("ny")
        >>> len(state.visible_rows())
        2
    """

    model_config = ConfigDict(frozen=True)

    file_name: Optional[str] = None
    raw_rows: List[Dict[str, Any]] = Field(default_factory=list)
    cleaned_rows: List[Dict[str, Any]] = Field(default_factory=list)
    profiles: List[ColumnProfile] = Field(default_factory=list)
    charts: List[ChartSpec] = Field(default_factory=list)
    active_tab: Tab = Tab.UPLOAD
    search_term: str = ""
    chat_history: List[ChatMessage] = Field(default_factory=list)

    def load_table(
        self,
        file_name: str,
        rows: Table,
        config: Optional[Config] = None
    ) -> "DashboardState":
        """
        Start over with a newly uploaded table.

        Profiles and automatic charts are recomputed; search and chat
        history are cleared.
        """
        config = config or Config()
        raw_rows = [dict(row) for row in rows]
        profiles = TableProfiler(config).profile(raw_rows)
        charts = ChartBuilder(config).build_automatic(raw_rows, profiles)

        logger.info(f"Loaded {file_name}: {len(raw_rows)} rows, {len(profiles)} columns")

        return DashboardState(
            file_name=file_name,
            raw_rows=raw_rows,
            cleaned_rows=[dict(row) for row in raw_rows],
            profiles=profiles,
            charts=charts,
            active_tab=Tab.CLEAN,
        )

    def apply_cleaning(
        self,
        strategies: Optional[Mapping[str, Union[str, CleaningStrategy]]] = None,
        config: Optional[Config] = None
    ) -> "DashboardState":
        """Clean the raw rows, rebuild the charts and move to the visualize tab."""
        if not self.raw_rows:
            raise ValueError("No table loaded")

        result = DataCleaner().clean(self.raw_rows, self.profiles, strategies)
        charts = ChartBuilder(config).build_automatic(result.rows, self.profiles)

        return self.model_copy(update={
            'cleaned_rows': result.rows,
            'charts': charts,
            'active_tab': Tab.VISUALIZE,
        })

    def select_tab(self, tab: Union[str, Tab]) -> "DashboardState":
        """
        Switch tabs.

        Raises:
            ValueError: If the tab is unknown or needs data that is not loaded
        """
        tab = Tab(tab)
        if tab in _NEEDS_RAW and not self.raw_rows:
            raise ValueError(f"Tab '{tab.value}' needs a loaded table")
        if tab in _NEEDS_CLEANED and not self.cleaned_rows:
            raise ValueError(f"Tab '{tab.value}' needs a loaded table")
        return self.model_copy(update={'active_tab': tab})

    def set_search(self, term: str) -> "DashboardState":
        return self.model_copy(update={'search_term': term or ""})

    def visible_rows(self) -> List[Dict[str, Any]]:
        """Cleaned rows matching the current search term."""
        return filter_rows(self.cleaned_rows, self.search_term)

    def add_chat_message(self, role: Union[str, ChatRole], content: str) -> "DashboardState":
        message = ChatMessage(role=ChatRole(role), content=content)
        return self.model_copy(update={'chat_history': self.chat_history + [message]})

    def insight_prompt(self, question: str, config: Optional[Config] = None) -> str:
        """
        Analyst prompt for a question about the cleaned table.

        The number of sample rows comes from ``reporting.sample_rows``.
        """
        config = config or Config()
        sample_count = int(config.get('reporting.sample_rows'))
        return build_insight_prompt(self.profiles, self.cleaned_rows, question, sample_count)
