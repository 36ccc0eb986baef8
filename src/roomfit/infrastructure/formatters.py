"""Text and JSON formatters for fit reports and the catalog."""

from __future__ import annotations

import json
from typing import Any

from roomfit.application.modes import ModeSpec
from roomfit.application.session import FitSession
from roomfit.domain.entities import FurnitureItem
from roomfit.domain.services import scaled_size
from roomfit.domain.value_objects import FitReason, FitResult, Region

FITS_MARK = "✓"
BLOCKED_MARK = "✗"


def _num(value: float) -> str:
    return f"{value:.1f}".removesuffix(".0")


class FitReportFormatter:
    """Formats the state of a fit session as a short text report."""

    def format(self, session: FitSession) -> str:
        result = session.result
        lines = [
            "FIT CHECK",
            "=" * 50,
            f"{'Mode:':<10} {session.mode.name.value}",
        ]
        item = session.item
        if item is None:
            lines.append(f"{'Item:':<10} (none selected)")
        else:
            snapshot = session.placement.snapshot()
            size = scaled_size(item.dimensions, snapshot.scale)
            lines.extend(
                [
                    f"{'Item:':<10} {item.name} ({item.id})",
                    f"{'Scale:':<10} {round(snapshot.scale * 100)}%",
                    f"{'Size:':<10} {_num(size.width)} x {_num(size.height)} x "
                    f"{_num(size.depth)} cm",
                    f"{'Position:':<10} ({_num(snapshot.x)}, {_num(snapshot.y)}"
                    + (f", {_num(snapshot.z)})" if session.mode.uses_room_space else ")"),
                ]
            )
        lines.append("-" * 50)
        lines.append(self.format_verdict(result))
        return "\n".join(lines)

    def format_verdict(self, result: FitResult) -> str:
        """One-line verdict, e.g. "✗ Blocked by person (92% confidence)"."""
        mark = FITS_MARK if result.fits else BLOCKED_MARK
        if result.code == FitReason.NO_SELECTION:
            return f"{mark} No item selected"
        if not result.detail:
            return f"{mark} {result.reason}"
        if result.code == FitReason.BLOCKED:
            return f"{mark} {result.reason} {result.detail}"
        return f"{mark} {result.reason} - {result.detail}"


class CatalogFormatter:
    """Formats catalog items as a table."""

    def format(self, items: list[FurnitureItem]) -> str:
        if not items:
            return "Catalog is empty."
        lines = [
            "FURNITURE CATALOG",
            "=" * 64,
            f"{'ID':<10} {'Name':<20} {'Category':<10} {'W x H x D (cm)'}",
            "-" * 64,
        ]
        for item in items:
            d = item.dimensions
            lines.append(
                f"{item.id:<10} {item.name:<20} {item.category.value:<10} "
                f"{_num(d.width)} x {_num(d.height)} x {_num(d.depth)}"
            )
        return "\n".join(lines)


class ModeFormatter:
    """Formats the viewer mode table."""

    def format(self, modes: list[ModeSpec]) -> str:
        lines = [
            "VIEWER MODES",
            "=" * 72,
            f"{'Mode':<14} {'Scale':<10} {'Default':<8} {'Refresh':<8} Description",
            "-" * 72,
        ]
        for mode in modes:
            scale = f"{_num(mode.scale_range.minimum)}-{_num(mode.scale_range.maximum)}"
            refresh = (
                f"{_num(mode.refresh_interval)}s"
                if mode.refresh_interval is not None
                else "-"
            )
            lines.append(
                f"{mode.name.value:<14} {scale:<10} {_num(mode.default_scale):<8} "
                f"{refresh:<8} {mode.description}"
            )
        return "\n".join(lines)


class JsonReportExporter:
    """Exports a fit session's verdict as JSON."""

    def export(self, session: FitSession) -> str:
        return json.dumps(self.to_dict(session), indent=2)

    def to_dict(self, session: FitSession) -> dict[str, Any]:
        result = session.result
        snapshot = session.placement.snapshot()
        data: dict[str, Any] = {
            "mode": session.mode.name.value,
            "item": session.item.id if session.item is not None else None,
            "placement": {
                "x": snapshot.x,
                "y": snapshot.y,
                "z": snapshot.z,
                "scale": snapshot.scale,
            },
            "result": {
                "fits": result.fits,
                "code": result.code.value,
                "reason": result.reason,
                "detail": result.detail,
                "border_color": result.border_color,
            },
        }
        if result.blocking_region is not None:
            data["result"]["blocking_region"] = _region_dict(result.blocking_region)
        return data


def _region_dict(region: Region) -> dict[str, Any]:
    return {
        "x": region.x,
        "y": region.y,
        "width": region.width,
        "height": region.height,
        "type": region.classification.value,
        "confidence": region.confidence,
        "label": region.label,
    }
