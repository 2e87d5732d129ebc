"""Board model: immutable records and the store that swaps them."""

from taskban.model.column import MAX_COLUMNS, Column, slugify
from taskban.model.filters import (
    BoardFilter,
    distinct_assignees,
    distinct_priorities,
    distinct_tags,
    filter_columns,
)
from taskban.model.ordering import move_between, reorder
from taskban.model.sample import default_columns, sample_columns
from taskban.model.store import BoardStore
from taskban.model.task import Assignee, Priority, Task

__all__ = [
    "MAX_COLUMNS",
    "Assignee",
    "BoardFilter",
    "BoardStore",
    "Column",
    "Priority",
    "Task",
    "default_columns",
    "distinct_assignees",
    "distinct_priorities",
    "distinct_tags",
    "filter_columns",
    "move_between",
    "reorder",
    "sample_columns",
    "slugify",
]
