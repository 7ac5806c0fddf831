"""Report builder — text and JSON output for palindrome-filter runs."""

import json
from typing import Any

from palindrome_filter.core.types import Report

# Values shown per strategy in text mode before eliding
TEXT_PREVIEW = 20


def _preview(values: list[int], limit: int = TEXT_PREVIEW) -> str:
    shown = ', '.join(str(v) for v in values[:limit])
    if len(values) > limit:
        shown += f', … (+{len(values) - limit} more)'
    return f'[{shown}]'


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = [f'palindrome-filter: {report.source} ({report.input_count} numbers)', '']

    for result in report.results:
        order = 'ordered' if result.ordered else 'unordered'
        lines.append(f'── {result.strategy} ({order}, {result.elapsed * 1000:.2f} ms)')
        lines.append(f'  selected {result.selected_count}/{result.input_count}: {_preview(result.selected)}')
        lines.append('')

    if len(report.results) > 1:
        mark = '✓' if report.agree() else '✗'
        lines.append(f'strategies agree: {mark}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'source': report.source,
        'input_count': report.input_count,
        'strategies': [
            {
                'name': r.strategy,
                'ordered': r.ordered,
                'elapsed_ms': round(r.elapsed * 1000, 3),
                'count': r.selected_count,
                'selected': r.selected,
            }
            for r in report.results
        ],
    }
    if len(report.results) > 1:
        obj['agree'] = report.agree()
    return json.dumps(obj, indent=2)
