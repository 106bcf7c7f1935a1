"""Gradio application for the threat detection demo."""

import logging

import gradio as gr
import numpy as np
from PIL import Image

from jalchaksh.analysis.service import analyze_image
from jalchaksh.config import RANDOM_SEED
from jalchaksh.demo.render import THREAT_TABLE_HEADERS, draw_detections, threat_rows
from jalchaksh.detection.export import statistics_to_dict
from jalchaksh.errors import JalchakshError
from jalchaksh.models import QualityMetrics

logger = logging.getLogger(__name__)


def _format_quality(quality: QualityMetrics, processing_time_ms: int) -> str:
    return (
        "| PSNR | SSIM | UIQM | Contrast | Sharpness | Color |\n"
        "|---|---|---|---|---|---|\n"
        f"| {quality.psnr:.2f}dB | {quality.ssim:.3f} | {quality.uiqm:.2f} "
        f"| {quality.contrast}% | {quality.sharpness}% | {quality.colorfulness}% |\n\n"
        f"Processing completed in {processing_time_ms}ms."
    )


def create_app(detector=None) -> gr.Blocks:
    """Create and return the Gradio Blocks app.

    Args:
        detector: Optional real detector tried before the synthetic generator.
    """

    def do_process(image: Image.Image | None, seed: float | None) -> tuple:
        if image is None:
            return None, [], "Please upload an image.", {}, "No threats detected."
        rng = np.random.default_rng(int(seed) if seed is not None else RANDOM_SEED)
        try:
            result = analyze_image(image, rng, detector=detector)
        except JalchakshError as e:
            logger.error("Processing failed: %s", e)
            return None, [], f"Processing failed: {e}", {}, "Processing failed."

        annotated = draw_detections(result.enhanced, result.detections)
        summary = f"**{len(result.detections)}** threat(s) detected ({result.source})."
        return (
            annotated,
            threat_rows(result.detections),
            _format_quality(result.quality, result.processing_time_ms),
            statistics_to_dict(result.statistics),
            summary,
        )

    with gr.Blocks(title="Jalchaksh Threat Detection") as app:
        gr.Markdown("# Jalchaksh Underwater Threat Detection")
        with gr.Row():
            with gr.Column():
                image_input = gr.Image(label="Upload an image", type="pil", image_mode="RGBA")
                seed_input = gr.Number(label="Seed (optional)", value=None, precision=0)
                process_btn = gr.Button("Process Image")
            with gr.Column():
                enhanced_output = gr.Image(label="Enhanced with detections", type="pil")
                summary_output = gr.Markdown("")

        threats_output = gr.Dataframe(headers=THREAT_TABLE_HEADERS, label="Threats", wrap=True)
        quality_output = gr.Markdown("")
        stats_output = gr.JSON(label="Image statistics")

        process_btn.click(
            fn=do_process,
            inputs=[image_input, seed_input],
            outputs=[enhanced_output, threats_output, quality_output, stats_output, summary_output],
        )

    return app
