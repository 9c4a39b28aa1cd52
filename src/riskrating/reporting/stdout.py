"""Human-readable stdout rendering of a classification result."""

from __future__ import annotations

from riskrating.constants.branding import ASCII_LOGO_LINES, RESULT_TITLE
from riskrating.constants.factors import FACTOR_LABELS
from riskrating.constants.reporting import ANSI_BOLD, ANSI_RESET, LEVEL_COLORS, SCORE_DECIMALS
from riskrating.model import ClassificationResult, Vector
from riskrating.parsers.numbers import format_number
from riskrating.parsers.vector import serialize_vector


def format_score(score: float) -> str:
    """Scores are shown with three decimals (``0.500``)."""
    return f"{score:.{SCORE_DECIMALS}f}"


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class ResultReporter:
    """Formats a classification result for the terminal."""

    def __init__(
        self,
        result: ClassificationResult,
        *,
        vector: Vector | None = None,
        share_url: str | None = None,
        color: bool = True,
        verbose: bool = False,
    ) -> None:
        self._result = result
        self._vector = vector
        self._share_url = share_url
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        """Render the full report as a single string."""
        sections = [self._render_header(), self._render_scores()]
        if self._verbose and self._vector is not None:
            sections.append(self._render_factors())
        return "\n".join(section for section in sections if section)

    def _level(self, label: str) -> str:
        color = LEVEL_COLORS.get(label, "")
        return _colorize(label, color) if self._color and color else label

    def _render_header(self) -> str:
        title = f"{RESULT_TITLE} ({self._result.profile_name})" if self._result.profile_name else RESULT_TITLE
        if self._color:
            title = _colorize(title, ANSI_BOLD)
        return "\n".join((*ASCII_LOGO_LINES, "", f"  {title}", "  " + "─" * 38))

    def _render_scores(self) -> str:
        r = self._result
        lines = [
            f"  {'Likelihood':<12}{format_score(r.likelihood_score):>7}  {self._level(r.likelihood_level)}",
            f"  {'Impact':<12}{format_score(r.impact_score):>7}  {self._level(r.impact_level)}",
            f"  {'Risk':<12}{'':>7}  {self._level(r.final_verdict)}",
        ]
        if self._vector is not None:
            lines.append(f"  {'Vector':<12}{serialize_vector(self._vector)}")
        if self._share_url:
            lines.append(f"  {'URL':<12}{self._share_url}")
        return "\n".join(lines)

    def _render_factors(self) -> str:
        assert self._vector is not None
        rows = [f"  {FACTOR_LABELS[key]:<26}{format_number(value):>4}" for key, value in self._vector.as_dict().items()]
        return "\n".join(["", "  Factors", *rows])
