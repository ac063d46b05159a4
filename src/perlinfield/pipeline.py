"""
Noise generation pipeline orchestrator.

Coordinates all components:
- Fractal noise generation (seeded, multi-octave)
- Quantization to an 8-bit raster
- PNG encoding
- Optional HDF5 archive of the full-precision field
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from .config import PerlinFieldConfig
from .noise import FractalNoiseGenerator, NoiseField, to_raster
from .output import FieldArchiveWriter, Raster, write_png
from .profiling import StageTimer, TimingAccumulator

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Outputs of one pipeline run."""

    raster: Raster
    noise_field: NoiseField
    image_path: Optional[Path]
    field_path: Optional[Path]
    timings: Dict[str, float] = field(default_factory=dict)


class NoiseGenerationPipeline:
    """
    End-to-end raster generation from a validated configuration.

    Example:
        ```python
        from perlinfield.config import load_config

        config = load_config(Path("configs/reference.yaml"))
        result = NoiseGenerationPipeline(config).run()
        print(result.raster.digest())
        ```
    """

    def __init__(self, config: PerlinFieldConfig):
        """
        Initialize pipeline.

        Args:
            config: Complete perlinfield configuration
        """
        self.config = config
        self.generator = FractalNoiseGenerator(config.noise)
        self.timings = TimingAccumulator()

        self.stats = {
            "total_time": 0.0,
            "noise_time": 0.0,
            "quantize_time": 0.0,
            "png_time": 0.0,
            "archive_time": 0.0,
        }

    def run(self, write_image: bool = True) -> PipelineResult:
        """
        Execute the pipeline.

        Args:
            write_image: Encode the raster to ``output.image_path``

        Returns:
            PipelineResult with the raster, field, written paths and timings
        """
        cfg = self.config
        noise = cfg.noise
        self.timings.clear()
        logger.info(
            f"Generating {noise.height}x{noise.width} raster ({noise.num_pixels} pixels): "
            f"octaves={noise.octaves} "
            f"attenuation={noise.attenuation} seed=(0x{noise.seed[0]:016X}, 0x{noise.seed[1]:016X})"
        )

        with StageTimer("total", self.timings) as total:
            with StageTimer("noise", self.timings):
                noise_field = self.generator.generate(progress=cfg.logging.progress)

            with StageTimer("quantize", self.timings):
                raster = to_raster(noise_field.values)

            image_path = None
            if write_image:
                with StageTimer("png", self.timings):
                    image_path = write_png(raster, cfg.output.image_path)

            field_path = None
            if cfg.output.field_path is not None:
                with StageTimer("archive", self.timings):
                    field_path = self._write_archive(noise_field, raster)

        self._update_stats()
        logger.info(f"Raster digest (sha256): {raster.digest()}")
        logger.info(f"Total time: {total.elapsed_ms():.1f} ms")

        return PipelineResult(
            raster=raster,
            noise_field=noise_field,
            image_path=image_path,
            field_path=field_path,
            timings={k: v["total_ms"] for k, v in self.timings.get_stats().items()},
        )

    def _write_archive(self, noise_field: NoiseField, raster: Raster) -> Path:
        out = self.config.output
        with FieldArchiveWriter(
            out.field_path,
            compression=out.compression,
            compression_opts=out.compression_level,
        ) as writer:
            writer.write_field(noise_field, raster)
            writer.write_metadata({"metadata": self.config.model_dump(mode="json")})
        return out.field_path

    def _update_stats(self) -> None:
        for name, s in self.timings.get_stats().items():
            key = f"{name}_time"
            if key in self.stats:
                self.stats[key] = s["total_ms"] / 1000.0
