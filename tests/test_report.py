import webbrowser

from tour_ga.evaluation import GenerationStats
from tour_ga.evolutionary import SearchResult
from tour_ga.report import format_history, format_result, maps_url, open_in_browser, route_names


CITIES = ["Bogota", "Santa Marta", "Cali"]


def _result():
    history = (GenerationStats(0, 12.0, 13.5, 15.0), GenerationStats(1, 10.0, 11.0, 12.0))
    return SearchResult(tour=(2, 0, 1), length=10, generations=1, runtime=0.25, history=history)


class TestNames:
    def test_route_names(self):
        assert route_names([2, 0, 1], CITIES) == ["Cali", "Bogota", "Santa Marta"]

    def test_maps_url_closes_loop(self):
        url = maps_url([2, 0, 1], CITIES)
        assert url == "https://www.google.com/maps/dir/Cali/Bogota/Santa+Marta/Cali"

    def test_maps_url_single_city(self):
        assert maps_url([0], ["Armenia-Quindio"]).endswith("/Armenia-Quindio/Armenia-Quindio")


class TestBrowser:
    def test_opened(self):
        seen = []
        assert open_in_browser("http://x", opener=lambda url: seen.append(url) or True) is True
        assert seen == ["http://x"]

    def test_no_browser(self, capsys):
        assert open_in_browser("http://x", opener=lambda url: False) is False
        assert "No browser" in capsys.readouterr().out

    def test_browser_error(self, capsys):
        def broken(url):
            raise webbrowser.Error("boom")

        assert open_in_browser("http://x", opener=broken) is False
        assert "boom" in capsys.readouterr().out


class TestFormatting:
    def test_format_result(self):
        text = format_result(_result(), CITIES)
        assert "Cali -> Bogota -> Santa Marta" in text
        assert "length: 10" in text
        assert "compute time: 0.2500s" in text
        assert "Santa+Marta" in text

    def test_format_history(self):
        lines = format_history(_result()).splitlines()
        assert lines == [
            "gen 0: best=12.00 avg=13.50 worst=15.00",
            "gen 1: best=10.00 avg=11.00 worst=12.00",
        ]
