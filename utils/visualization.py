# utils/visualization.py
import numpy as np
import matplotlib.pyplot as plt

# axis box of the envelope figure (cm)
ENVELOPE_LIMITS = (-50, 50, -50, 50, -30, 60)


class EnvelopeView:
    """
    Azimuth / elevation of the envelope figure.
    Owned by the caller and passed in, so no module-level view state.
    """

    def __init__(self, azim=0.0, elev=90.0):
        self.azim = float(azim)
        self.elev = float(elev)

    def apply(self, ax):
        ax.view_init(elev=self.elev, azim=self.azim)

    def sync_from(self, ax):
        """Pick up the angles after the user rotated the axes with the mouse."""
        self.azim = float(np.round(ax.azim))
        self.elev = float(np.round(ax.elev))


def draw_envelope_scatter(ax, points, size=40, cmap="autumn"):
    """
    Draw envelope points as a 3D scatter coloured by log-weight.
    points: (N,4) [x, y, z, ln(count)]
    """
    points = np.asarray(points, dtype=float).reshape(-1, 4)
    sc = ax.scatter(points[:, 0], points[:, 1], points[:, 2],
                    s=size, c=points[:, 3], cmap=cmap,
                    marker="o", depthshade=False)

    x0, x1, y0, y1, z0, z1 = ENVELOPE_LIMITS
    ax.set_xlim(x0, x1)
    ax.set_ylim(y0, y1)
    ax.set_zlim(z0, z1)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")
    ax.grid(True)
    return sc


def plot_work_envelope(points, view=None, title="3D Diagram of Work Envelope"):
    """
    Figure with the envelope scatter and a colour bar.
    Returns (fig, ax).
    """
    view = view if view is not None else EnvelopeView()

    fig = plt.figure(figsize=(8, 7))
    ax = fig.add_subplot(111, projection="3d")
    sc = draw_envelope_scatter(ax, points)
    fig.colorbar(sc, ax=ax, shrink=0.7, label="ln(hits)")
    ax.set_title(title)
    view.apply(ax)

    fig.canvas.mpl_connect("button_release_event", lambda _evt: view.sync_from(ax))
    return fig, ax
