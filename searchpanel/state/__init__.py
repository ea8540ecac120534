from searchpanel.state.inputs import FilterState, InputSearchState
from searchpanel.state.results import ResultState

__all__ = [
    "FilterState",
    "InputSearchState",
    "ResultState",
]
