import numpy as np
import matplotlib.pyplot as plt

from mazegen.core.grid import WALL, VISITED


def canvas_to_image(canvas: np.ndarray) -> np.ndarray:
    """Row-major float image: 1 for walls, 0.5 for visited markers, 0 for open."""
    image = np.zeros(canvas.shape, dtype=float)
    image[canvas == WALL] = 1.0
    image[canvas == VISITED] = 0.5
    return image.T


def plot_maze(canvas, ax=None, title=None, fig_path=None, show_fig=False):
    """Draw a maze canvas with matplotlib. Returns the figure and axes."""
    if ax is None:
        n_cols, n_rows = canvas.shape
        fig, ax = plt.subplots(figsize=(max(2.0, n_cols / 8), max(2.0, n_rows / 4)))
    else:
        fig = ax.figure

    # canvas cells are twice as tall as wide in a terminal
    ax.imshow(canvas_to_image(canvas), cmap="Greys", vmin=0.0, vmax=1.0, aspect=2.0,
              interpolation="nearest")
    ax.set_xticks([])
    ax.set_yticks([])
    if title is not None:
        ax.set_title(title)

    if fig_path is not None:
        fig.savefig(fig_path, bbox_inches="tight")
    if show_fig:
        plt.show()
    return fig, ax
