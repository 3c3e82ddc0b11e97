import pyqtgraph as pg

from app.state import MetricsSnapshot
from utils.graph_helper import history_xy, setup_wpm_plot, update_curve


class _FakeCurve:
    def __init__(self):
        self.data = None

    def setData(self, x, y):
        self.data = (x, y)


HISTORY = (
    MetricsSnapshot(wpm=12.0, accuracy=100.0, progress=10.0, timestamp=1),
    MetricsSnapshot(wpm=18.0, accuracy=90.0, progress=20.0, timestamp=2),
)


def test_history_xy_splits_series():
    assert history_xy(HISTORY) == ([1, 2], [12.0, 18.0])
    assert history_xy(()) == ([], [])


def test_update_curve_feeds_times_and_wpm():
    curve = _FakeCurve()
    update_curve(curve, HISTORY)
    assert curve.data == ([1, 2], [12.0, 18.0])


def test_setup_wpm_plot_returns_empty_curve(qtbot):
    widget = pg.PlotWidget()
    qtbot.addWidget(widget)
    curve = setup_wpm_plot(widget, "#eab308")
    update_curve(curve, HISTORY)
    x, y = curve.getData()
    assert list(x) == [1, 2]
    assert list(y) == [12.0, 18.0]
