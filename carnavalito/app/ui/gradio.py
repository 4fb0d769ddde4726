"""User interface assembly for the Gradio front-end."""

from __future__ import annotations

from typing import Tuple

import gradio as gr

from carnavalito.core import PoetryAnalysisError

from ..services.poetry_service import InputValidationError, PoetryService

_EXAMPLE_COPLA = (
    "En Cádiz la bella\n"
    "donde el sol se refleja\n"
    "vive una doncella\n"
    "con su amor y su queja"
)

_TELEMETRY_PLACEHOLDER = "_Run an analysis to see request telemetry._"


def _error_markdown(exc: Exception) -> str:
    return f"❌ {exc}"


def create_interface(service: PoetryService) -> gr.Blocks:
    """Construct the Blocks UI: analysis, quick check, verse advice and rhyme lookup."""

    formatter = service.formatter

    def _telemetry_markdown() -> str:
        return formatter.format_telemetry(service.get_latest_telemetry()) or _TELEMETRY_PLACEHOLDER

    def analyze(text: str, level: str) -> Tuple[str, str]:
        try:
            analysis = service.analyze_poem(text, level)
        except (InputValidationError, PoetryAnalysisError) as exc:
            return _error_markdown(exc), _telemetry_markdown()
        return formatter.format_analysis(analysis), _telemetry_markdown()

    def quick(text: str) -> Tuple[str, str]:
        try:
            result = service.quick_analysis(text)
        except (InputValidationError, PoetryAnalysisError) as exc:
            return _error_markdown(exc), _telemetry_markdown()
        return formatter.format_quick(result), _telemetry_markdown()

    def improve(verse: str, target: float) -> Tuple[str, str]:
        try:
            advice = service.improve_verse(verse, int(target))
        except (InputValidationError, PoetryAnalysisError) as exc:
            return _error_markdown(exc), _telemetry_markdown()
        return formatter.format_advice(advice), _telemetry_markdown()

    def rhymes(word: str) -> Tuple[str, str]:
        try:
            suggestions = service.lookup_rhymes(word)
        except (InputValidationError, PoetryAnalysisError) as exc:
            return _error_markdown(exc), _telemetry_markdown()
        return formatter.format_rhymes(suggestions), _telemetry_markdown()

    with gr.Blocks(title="Carnavalito") as demo:
        gr.Markdown(
            "# 🎭 Carnavalito\n"
            "Meter, rhyme and carnival style for Cádiz coplas."
        )

        with gr.Tab("Analyze poem"):
            poem_input = gr.Textbox(
                label="Poem",
                lines=8,
                value=_EXAMPLE_COPLA,
                max_length=service.settings.max_text_length,
            )
            level_input = gr.Radio(
                choices=["basic", "complete"],
                value="complete",
                label="Analysis level",
            )
            analyze_button = gr.Button("Analyze", variant="primary")
            analysis_output = gr.Markdown()

        with gr.Tab("Quick check"):
            quick_input = gr.Textbox(
                label="Poem",
                lines=6,
                max_length=service.settings.max_quick_text_length,
            )
            quick_button = gr.Button("Check meter")
            quick_output = gr.Markdown()

        with gr.Tab("Improve a verse"):
            verse_input = gr.Textbox(label="Verse", max_length=service.settings.max_verse_length)
            target_input = gr.Slider(minimum=4, maximum=14, step=1, value=8, label="Target syllables")
            improve_button = gr.Button("Suggest")
            improve_output = gr.Markdown()

        with gr.Tab("Rhymes"):
            word_input = gr.Textbox(label="Word", max_length=service.settings.max_word_length)
            rhyme_button = gr.Button("Find rhymes")
            rhyme_output = gr.Markdown()

        telemetry_output = gr.Markdown(_TELEMETRY_PLACEHOLDER)

        analyze_button.click(
            analyze,
            inputs=[poem_input, level_input],
            outputs=[analysis_output, telemetry_output],
        )
        quick_button.click(quick, inputs=[quick_input], outputs=[quick_output, telemetry_output])
        improve_button.click(
            improve,
            inputs=[verse_input, target_input],
            outputs=[improve_output, telemetry_output],
        )
        rhyme_button.click(rhymes, inputs=[word_input], outputs=[rhyme_output, telemetry_output])

    return demo


__all__ = ["create_interface"]
