"""Main converter orchestrating the complete pipeline.

AIDEV-NOTE: load -> threshold -> pack -> render -> save. The core stages
(thresholding, packing, bin2hex, rendering) are pure; all file I/O and
progress output live here.
"""

from dataclasses import replace
from pathlib import Path

from models import ConversionConfig, ConversionResult, OutputGrid

from .buffers import PixelBuffer
from .errors import OutputWriteError
from .packing import pack, validate_dimensions
from .rendering import render_c_array
from .thresholding import to_mask
from .utils import ensure_dir, load_image, validate_output_name


class BitmapConverter:
    """Converts bitmap images into packed hex C arrays."""

    def __init__(self, config: ConversionConfig | None = None):
        self.config = config or ConversionConfig()

    def load_image(self, file_path: str | Path) -> PixelBuffer:
        """Load a PNG file as an RGBA PixelBuffer.

        Raises:
            ImageLoadError: If the file cannot be loaded or is invalid
        """
        return load_image(file_path)

    def convert_buffer(self, buffer: PixelBuffer) -> OutputGrid:
        """Threshold and pack a buffer in memory.

        The buffer is thresholded in place.

        Raises:
            DimensionMismatchError: If the image doesn't split into batches
            InvalidMaskValueError: If packing finds a non black/white pixel
        """
        geometry = self.config.geometry
        validate_dimensions(buffer.width, buffer.height, geometry)
        mask = to_mask(buffer, self.config.threshold)
        return pack(mask, geometry)

    def output_path(self, name: str) -> Path:
        return Path(self.config.output_dir) / f"{name}.{self.config.output_ext}"

    def preview_path(self, name: str) -> Path:
        return Path(self.config.preview_dir) / f"{name}.{self.config.preview_ext}"

    def convert(self, file_path: str | Path) -> ConversionResult:
        """Execute the complete conversion for one file.

        Args:
            file_path: Path to input PNG

        Returns:
            ConversionResult with the grid, rendered text and written paths
        """
        print(f"Starting conversion of {file_path}")

        print("Validating output variable name...")
        name = validate_output_name(self.config.output)

        print("Reading input data...")
        buffer = self.load_image(file_path)
        width, height = buffer.width, buffer.height
        print(f"Loaded image with size: {width}x{height} pixels.")

        print("Converting data into binary batches...")
        grid = self.convert_buffer(buffer)
        print(
            f"Image size OK: {grid.width}x{grid.height} batches of "
            f"{grid.batch_width}x{grid.batch_height} pixels."
        )

        text = render_c_array(grid, name, minify=self.config.minify)

        output_path = self.output_path(name)
        print(f"Saving converted data to {output_path.parent}")
        try:
            ensure_dir(output_path.parent)
            with open(output_path, "w", newline="") as f:
                f.write(text)
        except OSError as e:
            raise OutputWriteError(output_path, str(e)) from e

        preview_path = None
        if self.config.preview:
            preview_path = self.preview_path(name)
            print(f"Saving preview image to {preview_path.parent}")
            # Always PNG data, whatever the preview extension says
            try:
                ensure_dir(preview_path.parent)
                buffer.to_image().save(preview_path, format="PNG")
            except OSError as e:
                raise OutputWriteError(preview_path, str(e)) from e

        print(f"✓ Finished conversion of {file_path}")

        return ConversionResult(
            grid=grid,
            text=text,
            output_path=output_path,
            preview_path=preview_path,
            image_width=width,
            image_height=height,
            name=name,
        )

    def convert_many(self, file_paths: "list[str | Path]") -> "list[ConversionResult]":
        """Convert several files, naming each output after its file stem.

        AIDEV-NOTE: Stops at the first failing file; earlier outputs stay
        on disk.
        """
        results = []
        for file_path in file_paths:
            converter = BitmapConverter(replace(self.config, output=Path(file_path).stem))
            results.append(converter.convert(file_path))
        return results
