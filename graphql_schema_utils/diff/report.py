"""
Summaries of schema diffs.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .engine import OptionsLike, resolve_options, diff_schema
from .types import DiffKind, DiffLevel, DiffRecord


@dataclass
class DiffReport:
    """Result of diffing two schemas, with breaking/compatible counts."""
    this_label: str
    other_label: str
    records: list[DiffRecord] = field(default_factory=list)
    generated_at: datetime = field(default_factory=datetime.now)

    @property
    def total_changes(self) -> int:
        return len(self.records)

    @property
    def breaking_changes(self) -> list[DiffRecord]:
        return [r for r in self.records if not r.backward_compatible]

    @property
    def compatible_changes(self) -> list[DiffRecord]:
        return [r for r in self.records if r.backward_compatible]

    @property
    def is_backward_compatible(self) -> bool:
        return not self.breaking_changes

    def get_records_by_kind(self, diff_kind: DiffKind) -> list[DiffRecord]:
        return [r for r in self.records if r.diff_kind == diff_kind]

    def to_dict(self) -> dict[str, Any]:
        return {
            'this_label': self.this_label, 'other_label': self.other_label,
            'generated_at': self.generated_at.isoformat(),
            'summary': {'total_changes': self.total_changes, 'breaking_changes': len(self.breaking_changes), 'compatible_changes': len(self.compatible_changes), 'backward_compatible': self.is_backward_compatible},
            'records': [r.to_dict() for r in self.records],
        }

    def to_text(self) -> str:
        lines = [f"{'BREAKING' if not r.backward_compatible else 'ok':<8} {r.diff_kind.value}: {r.description}" for r in self.records]
        lines.append(f"{self.total_changes} differences ({len(self.breaking_changes)} breaking)")
        return '\n'.join(lines)

    def to_markdown(self) -> str:
        content = [
            "# Schema Diff Report", "",
            f"**From:** {self.this_label}",
            f"**To:** {self.other_label}",
            f"**Generated:** {self.generated_at.strftime('%Y-%m-%d %H:%M:%S')}", "",
            "## Summary", "",
            f"- **Total Changes:** {self.total_changes}",
            f"- **Breaking Changes:** {len(self.breaking_changes)}",
            f"- **Backward Compatible Changes:** {len(self.compatible_changes)}",
            f"- **Backward Compatible:** {'Yes' if self.is_backward_compatible else 'No'}", "",
        ]
        if self.breaking_changes:
            content.extend(["## Breaking Changes", ""])
            for record in self.breaking_changes: content.append(f"- **{record.diff_kind.value}** {record.description}")
            content.append("")
        if self.compatible_changes:
            content.extend(["## Backward Compatible Changes", ""])
            for record in self.compatible_changes: content.append(f"- **{record.diff_kind.value}** {record.description}")
            content.append("")
        return '\n'.join(content)


def build_report(this, other, options: OptionsLike = None) -> DiffReport:
    """Diff two schema graphs and wrap the result in a DiffReport."""
    resolved = resolve_options(options, DiffLevel.SCHEMA)
    records = diff_schema(this, other, resolved)
    return DiffReport(
        this_label=resolved.label_for_this,
        other_label=resolved.label_for_other,
        records=records,
    )
