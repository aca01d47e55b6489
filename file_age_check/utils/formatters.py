"""Formatting utilities for plugin output."""

from typing import List

from ..core.models import EvaluationResult, PerfData


def format_file_size(size_bytes: int) -> str:
    """Format file size in human readable format.
    
    Args:
        size_bytes: Size in bytes.
        
    Returns:
        Human readable size string.
    """
    if size_bytes < 1024:
        return f"{size_bytes}B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes // 1024}KB"
    elif size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes // (1024 * 1024)}MB"
    else:
        return f"{size_bytes // (1024 * 1024 * 1024)}GB"


def format_perfdata(perfdata: PerfData) -> str:
    """Render one measurement as ``label=value[uom];warn;crit``.

    Labels containing spaces or quotes are single-quoted.
    """
    label = perfdata.label
    if " " in label or "'" in label or "=" in label:
        label = "'" + label.replace("'", "''") + "'"

    text = f"{label}={perfdata.value}{perfdata.uom}"
    if perfdata.warning is not None or perfdata.critical is not None:
        warning = "" if perfdata.warning is None else perfdata.warning
        critical = "" if perfdata.critical is None else perfdata.critical
        text += f";{warning};{critical}"
    return text


def format_perfdata_list(perfdata: List[PerfData]) -> str:
    return " ".join(format_perfdata(p) for p in perfdata)


def format_status_line(result: EvaluationResult) -> str:
    """Render the single plugin output line.
    
    Args:
        result: Evaluation result to render.
        
    Returns:
        ``<STATE> - <message>`` followed by `` | <perfdata>`` when present.
    """
    line = f"{result.severity.name} - {result.message}"
    if result.perfdata:
        line += f" | {format_perfdata_list(result.perfdata)}"
    return line
