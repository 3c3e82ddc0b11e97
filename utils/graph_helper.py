from typing import Iterable, List, Tuple
import pyqtgraph as pg

from app.state import MetricsSnapshot


def history_xy(history: Iterable[MetricsSnapshot]) -> Tuple[List[int], List[float]]:
    times, wpms = [], []
    for snap in history:
        times.append(snap.timestamp)
        wpms.append(snap.wpm)
    return times, wpms

def setup_wpm_plot(plot_widget: pg.PlotWidget, line_color: str):
    plot_widget.setBackground(None)
    plot_widget.showGrid(x=False, y=True, alpha=0.15)
    plot_widget.setMenuEnabled(False)
    plot_widget.setMouseEnabled(x=False, y=False)
    plot_widget.hideButtons()
    plot_widget.setLabel('left', 'WPM')
    plot_widget.setLabel('bottom', 'seconds')
    curve = plot_widget.plot([], [], pen=pg.mkPen(line_color, width=2.5), antialias=True)
    return curve

def update_curve(curve, history: Iterable[MetricsSnapshot]):
    x, y = history_xy(history)
    curve.setData(x, y)
