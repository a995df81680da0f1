from ...constants import LevelLabels, Severity


def level_label(level: int) -> str:
    """Map a severity to its display label.

    Comparison cascades from the most severe bucket down and every boundary is
    inclusive, so ``CRITICAL`` reports as ``ERROR`` and ``NOTICE`` as ``INFO``.
    """
    if level <= Severity.EMERGENCY:
        return LevelLabels.EMERGENCY
    if level <= Severity.ERROR:
        return LevelLabels.ERROR
    if level <= Severity.WARNING:
        return LevelLabels.WARNING
    if level <= Severity.INFO:
        return LevelLabels.INFO
    return LevelLabels.DEBUG


def is_enabled(threshold: int, level: int) -> bool:
    return threshold >= level


def is_suppressed(threshold: int, level: int) -> bool:
    return level > threshold


def severity_name(level: int) -> str:
    try:
        return Severity(level).name
    except ValueError:
        return str(level)
