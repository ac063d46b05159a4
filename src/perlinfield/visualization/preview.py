"""
Matplotlib preview of a generated raster.

Renders the raster in grayscale next to its intensity histogram, which
makes octave balance visible at a glance: a narrow histogram means the
normalized field rarely approaches the [-1, 1] clamp.
"""

from pathlib import Path
from typing import Tuple

import numpy as np
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.gridspec as gridspec

from ..output.raster import Raster


class RasterPreviewPlotter:
    """
    Two-panel figure: grayscale raster and intensity histogram.

    Example:
        >>> plotter = RasterPreviewPlotter(bins=64)
        >>> plotter.save(raster, Path("preview.png"), title="seed 0x243F...")
    """

    def __init__(
        self,
        bins: int = 64,
        figsize: Tuple[float, float] = (10.0, 4.5),
        dpi: int = 100,
    ):
        """
        Initialize preview plotter.

        Args:
            bins: Number of histogram bins over [0, 255]
            figsize: Figure size in inches
            dpi: Dots per inch for rasterization
        """
        if bins < 1:
            raise ValueError(f"bins must be >= 1, got {bins}")
        self.bins = bins
        self.figsize = figsize
        self.dpi = dpi

        self.bar_color = '#1f77b4'
        self.title_fontsize = 10
        self.tick_fontsize = 8

    def plot(self, raster: Raster, title: str = "") -> plt.Figure:
        """Build the preview figure (caller owns closing it)."""
        pixels = raster.to_array()

        fig = plt.figure(figsize=self.figsize, dpi=self.dpi)
        gs = gridspec.GridSpec(1, 2, width_ratios=[1, 1.2], figure=fig)

        ax_img = fig.add_subplot(gs[0])
        ax_img.imshow(pixels, cmap="gray", vmin=0, vmax=255, interpolation="nearest")
        ax_img.set_title(f"{raster.width}x{raster.height}", fontsize=self.title_fontsize)
        ax_img.set_xticks([])
        ax_img.set_yticks([])

        ax_hist = fig.add_subplot(gs[1])
        counts, edges = np.histogram(pixels, bins=self.bins, range=(0, 256))
        ax_hist.bar(edges[:-1], counts, width=np.diff(edges), align="edge", color=self.bar_color)
        ax_hist.set_xlim(0, 256)
        ax_hist.set_xlabel("Intensity", fontsize=self.tick_fontsize)
        ax_hist.set_ylabel("Pixels", fontsize=self.tick_fontsize)
        ax_hist.tick_params(labelsize=self.tick_fontsize)
        ax_hist.set_title(
            f"mean={pixels.mean():.1f} std={pixels.std():.1f} "
            f"min={int(pixels.min())} max={int(pixels.max())}",
            fontsize=self.title_fontsize,
        )

        if title:
            fig.suptitle(title, fontsize=self.title_fontsize)
        fig.tight_layout()
        return fig

    def save(self, raster: Raster, output_path: Path, title: str = "") -> Path:
        """Render and save the preview figure."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        fig = self.plot(raster, title=title)
        try:
            fig.savefig(output_path, dpi=self.dpi)
        finally:
            plt.close(fig)
        return output_path
