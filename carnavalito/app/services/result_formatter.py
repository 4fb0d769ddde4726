"""Markdown rendering of analysis results for the front-end."""

from __future__ import annotations

from html import escape
from typing import Any, Dict, List

from carnavalito.core import PoemAnalysis, QuickAnalysis, RhymeSuggestions, VerseAdvice

_OCTOSYLLABIC = "Octosyllabic"


class AnalysisFormatter:
    """Render engine records as markdown blocks."""

    def format_analysis(self, analysis: PoemAnalysis) -> str:
        metrics = analysis.metrics
        stats = metrics.classification
        rhyme = analysis.rhyme

        lines: List[str] = ["### 📊 Poetic analysis", ""]
        lines.append("**Structure**")
        lines.append(f"- Verses: {analysis.total_verses}")
        lines.append(f"- Meter: {stats.pattern}")
        lines.append(f"- Rhyme: {rhyme.rhyme_type} ({rhyme.scheme})")
        lines.append(f"- Rhyme quality: {rhyme.quality}")
        lines.append(f"- Average syllables: {stats.mean_syllables}")
        lines.append("")

        style = analysis.style
        if style is not None:
            lines.append(f"**Carnival style:** {style.level}")
            lines.append(f"- Score: {style.score * 100:.1f}%")
            if style.features:
                lines.append(f"- Features: {', '.join(escape(item) for item in style.features)}")
            lines.append("")

        if analysis.forms:
            lines.append(f"**Traditional form:** {', '.join(analysis.forms)}")
            lines.append("")

        if stats.pattern == _OCTOSYLLABIC:
            lines.append("✨ Octosyllables are the backbone of carnival coplas.")
            lines.append("")

        lines.append("**Verse by verse**")
        for verse, detail in zip(metrics.verses, rhyme.verses):
            lines.append(
                f"{verse.position}. \"{escape(verse.text)}\" "
                f"({verse.syllables} syllables, rhyme {detail.group})"
            )

        devices = analysis.devices
        if devices is not None and devices.total:
            lines.append("")
            lines.append("**Poetic devices**")
            for label, items in (
                ("Alliteration", devices.alliterations),
                ("Simile", devices.similes),
                ("Anaphora", devices.anaphoras),
                ("Personification", devices.personifications),
            ):
                if items:
                    lines.append(f"- {label}: {', '.join(escape(item) for item in items)}")

        if analysis.improvements:
            lines.append("")
            lines.append("**💡 Suggestions**")
            for improvement in analysis.improvements:
                lines.append(f"- {escape(improvement.description)} ({improvement.details})")

        if style is not None and style.suggestions:
            lines.append("")
            lines.append("**🎭 Style tips**")
            lines.extend(f"- {escape(tip)}" for tip in style.suggestions)

        return "\n".join(lines)

    def format_quick(self, result: QuickAnalysis) -> str:
        counts = ", ".join(str(count) for count in result.syllables)
        return "\n".join(
            [
                "### ⚡ Quick check",
                "",
                f"- Verses: {result.verses_count}",
                f"- Syllables: {counts}",
                f"- Rhyme pattern: {result.rhyme_pattern}",
                "",
                result.message,
            ]
        )

    def format_advice(self, advice: VerseAdvice) -> str:
        lines = [
            "### ✍️ Verse advice",
            "",
            f"> {escape(advice.verse)}",
            "",
            f"- Current syllables: {advice.current_syllables}",
            f"- Target syllables: {advice.target_syllables}",
            f"- Ending: `{advice.ending}`",
        ]
        for suggestion in advice.suggestions:
            lines.append("")
            lines.append(f"**{escape(suggestion.description)}**")
            lines.extend(f"- {escape(example)}" for example in suggestion.examples)
        return "\n".join(lines)

    def format_rhymes(self, suggestions: RhymeSuggestions) -> str:
        def _render(words) -> str:
            return ", ".join(escape(word) for word in words) if words else "_none in the table_"

        return "\n".join(
            [
                f"### 🎶 Rhymes for '{escape(suggestions.word)}'",
                "",
                f"- Consonant (`-{suggestions.consonant_pattern}`): {_render(suggestions.consonant)}",
                f"- Assonant (`{suggestions.assonant_pattern or '-'}`): {_render(suggestions.assonant)}",
            ]
        )

    def format_telemetry(self, snapshot: Dict[str, Any]) -> str:
        """Markdown summary of a telemetry snapshot (empty string when there is none)."""

        if not snapshot or not snapshot.get("name"):
            return ""
        lines = [f"#### Last request: `{snapshot['name']}`"]
        for event in (snapshot.get("events") or [])[-8:]:
            duration = event.get("duration")
            if isinstance(duration, (int, float)):
                lines.append(f"- `{event.get('name', 'event')}` took {duration * 1000:.1f} ms")
        counters = snapshot.get("counters") or {}
        if counters:
            lines.append("")
            lines.append(", ".join(f"`{key}`: {value:g}" for key, value in counters.items()))
        return "\n".join(lines)


__all__ = ["AnalysisFormatter"]
