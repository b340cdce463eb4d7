"""Stage and outcome color maps."""

from chartmuseum_sync.models import TransferStage

STAGE_COLORS: dict[TransferStage, str] = {
    TransferStage.FETCH: "red",
    TransferStage.READ: "yellow",
    TransferStage.UPLOAD: "red bold",
}


def styled_stage(stage: TransferStage) -> str:
    color = STAGE_COLORS.get(stage, "white")
    return f"[{color}]{stage.value}[/{color}]"


def styled_count(count: int, color: str) -> str:
    if not count:
        return f"[dim]{count}[/dim]"
    return f"[{color}]{count}[/{color}]"
