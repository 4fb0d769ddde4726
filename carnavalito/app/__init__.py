"""Service layer, configuration and Gradio front-end."""
