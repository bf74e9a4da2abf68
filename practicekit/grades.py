"""Weighted course grade calculator."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass

INSTRUCTIONS = (
    "enter grades as <category> <score>\n"
    "  <category> := exam | final-exam | hw | lw | reading | engagement\n"
    "     <score> := numeric value\n"
    "enter an empty line to end input\n"
)

IGNORED_MESSAGE = "ignored invalid input"

_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_BONUS = 15.0
_CAP = 100.0
_LAB_TOLERANCE = 0.01


@dataclass
class GradeSummary:
    """Component averages, weighted total and letter grade."""

    exam_average: float
    hw_average: float
    lw_average: float
    reading: float
    engagement: float
    weighted_total: float
    letter: str
    ignored: int = 0


def parse_entry(line):
    """Split ``"<category> <score>"`` into ``(category, score)``.

    A line without a category or a readable score gives ``("ignore", 0.0)``.
    """
    parts = line.split(None, 1)
    if not parts:
        return "ignore", 0.0
    category = parts[0]
    rest = parts[1] if len(parts) > 1 else ""
    match = _NUMBER.match(rest)
    if match is None:
        return "ignore", 0.0
    return category, float(match.group(1))


def letter_grade(total):
    """Return the letter for a weighted total: A, B, C, D or F."""
    if total < 60.0:
        return "F"
    if total < 70.0:
        return "D"
    if total < 80.0:
        return "C"
    if total < 90.0:
        return "B"
    return "A"


def compute_summary(lines):
    """Read grade lines up to the first empty one and summarise them."""
    exam_sum = hw_sum = lab_sum = reading_sum = engagement_sum = 0.0
    final_score = 0.0
    exams = finals = hws = labs = readings = engagements = 0
    ignored = 0

    for raw in lines:
        line = raw.rstrip("\n")
        if line == "":
            break
        category, score = parse_entry(line)
        if category == "exam":
            exam_sum += score
            exams += 1
        elif category == "final-exam":
            final_score = score
            finals += 1
        elif category == "hw":
            hw_sum += score
            hws += 1
        elif category == "lw":
            if abs(score - 1.0) <= _LAB_TOLERANCE:
                lab_sum += 100.0
            labs += 1
        elif category == "reading":
            reading_sum += score
            readings += 1
        elif category == "engagement":
            engagement_sum += score
            engagements += 1
        else:
            ignored += 1

    exam_divisor = 2.0 if max(finals, 1) == 1 and max(exams, 1) == 1 else 3.0
    exam_average = (exam_sum + final_score) / exam_divisor
    if final_score > exam_average:
        exam_average = final_score

    hw_average = hw_sum / max(hws, 1)
    lw_average = lab_sum / max(labs, 1)
    reading = reading_sum / max(readings, 1)
    engagement = engagement_sum / max(engagements, 1)
    if readings > 0:
        reading += _BONUS
    if engagements > 0:
        engagement += _BONUS
    reading = min(reading, _CAP)
    engagement = min(engagement, _CAP)

    weighted = (
        0.4 * exam_average
        + 0.4 * hw_average
        + 0.1 * lw_average
        + 0.05 * reading
        + 0.05 * engagement
    )
    return GradeSummary(
        exam_average=exam_average,
        hw_average=hw_average,
        lw_average=lw_average,
        reading=reading,
        engagement=engagement,
        weighted_total=weighted,
        letter=letter_grade(weighted),
        ignored=ignored,
    )


def _fmt(value):
    return f"{value:g}"


def format_summary(summary):
    """Return the printed summary block."""
    return (
        "summary:\n"
        f"      exam average: {_fmt(summary.exam_average)}\n"
        f"        hw average: {_fmt(summary.hw_average)}\n"
        f"        lw average: {_fmt(summary.lw_average)}\n"
        f"           reading: {_fmt(summary.reading)}\n"
        f"        engagement: {_fmt(summary.engagement)}\n"
        "    ---------------\n"
        f"    weighted total: {_fmt(summary.weighted_total)}\n"
        f"final letter grade: {summary.letter}\n"
    )


def main(argv=None):
    """Read grades from standard input and print the summary."""
    sys.stdout.write(INSTRUCTIONS)
    summary = compute_summary(sys.stdin)
    for _ in range(summary.ignored):
        print(IGNORED_MESSAGE)
    sys.stdout.write(format_summary(summary))
    return 0


if __name__ == "__main__":
    sys.exit(main())