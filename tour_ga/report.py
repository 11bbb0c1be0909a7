import webbrowser
from typing import Callable, List, Sequence
from urllib.parse import quote_plus

from .evolutionary import SearchResult


GOOGLE_MAPS_DIR = "https://www.google.com/maps/dir/"


def route_names(tour: Sequence[int], cities: Sequence[str]) -> List[str]:
    return [cities[i] for i in tour]


def maps_url(tour: Sequence[int], cities: Sequence[str], base: str = GOOGLE_MAPS_DIR) -> str:
    # Closed loop: the first city is repeated at the end.
    stops = route_names(tour, cities)
    stops.append(stops[0])
    return base + "/".join(quote_plus(s) for s in stops)


def open_in_browser(url: str, opener: Callable[[str], bool] = webbrowser.open) -> bool:
    try:
        opened = opener(url)
    except webbrowser.Error as exc:
        print(f"Could not open browser: {exc}")
        return False
    if not opened:
        print("No browser available on this platform.")
    return bool(opened)


def format_result(result: SearchResult, cities: Sequence[str]) -> str:
    lines = [
        f"best route: {' -> '.join(route_names(result.tour, cities))}",
        f"length: {result.length}",
        f"generations: {result.generations}",
        f"compute time: {result.runtime:.4f}s",
        f"maps: {maps_url(result.tour, cities)}",
    ]
    return "\n".join(lines)


def format_history(result: SearchResult) -> str:
    return "\n".join(
        f"gen {s.generation}: best={s.best:.2f} avg={s.mean:.2f} worst={s.worst:.2f}" for s in result.history
    )
