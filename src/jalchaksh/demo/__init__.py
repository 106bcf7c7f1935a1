"""Threat detection demo UI with Gradio."""


def main() -> None:
    """CLI entry point for the Gradio demo."""
    from jalchaksh.demo.app import create_app
    from jalchaksh.log import setup_logging

    setup_logging()
    app = create_app()
    app.launch()
