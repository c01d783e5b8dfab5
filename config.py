import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from classifier_registry import CLASSIFIER_NAMES, DEFAULT_CLASSIFIER
from classifiers.chicken_wing import ChickenWingThresholds
from classifiers.limb_vote import LimbVoteThresholds
from note_trigger import DEFAULT_LOOKAHEAD
from notes import DEFAULT_PITCHES, NoteTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassifierConfig:
    name: str = DEFAULT_CLASSIFIER
    bend_max: float = 65.0
    straight_min: float = 165.0
    # Limb vote only.
    side_low: float = 30.0
    side_high: float = 160.0

    def limb_vote_thresholds(self) -> LimbVoteThresholds:
        return LimbVoteThresholds(
            bend_max=self.bend_max,
            straight_min=self.straight_min,
            side_low=self.side_low,
            side_high=self.side_high,
        )

    def chicken_wing_thresholds(self) -> ChickenWingThresholds:
        return ChickenWingThresholds(bend_max=self.bend_max, straight_min=self.straight_min)


@dataclass(frozen=True)
class NotesConfig:
    table: Tuple[str, ...] = DEFAULT_PITCHES
    lookahead: float = DEFAULT_LOOKAHEAD

    def note_table(self) -> NoteTable:
        return NoteTable(self.table)


@dataclass(frozen=True)
class SessionConfig:
    # "release": lost pose counts as NotDab. "hold": lost frames are skipped.
    incomplete_policy: str = "release"


@dataclass(frozen=True)
class CameraConfig:
    index: int = 0
    width: int = 1280
    height: int = 720


@dataclass(frozen=True)
class PoseConfig:
    min_detection_confidence: float = 0.5
    min_tracking_confidence: float = 0.5
    visibility_threshold: float = 0.5


@dataclass(frozen=True)
class AppConfig:
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    notes: NotesConfig = field(default_factory=NotesConfig)
    session: SessionConfig = field(default_factory=SessionConfig)
    camera: CameraConfig = field(default_factory=CameraConfig)
    pose: PoseConfig = field(default_factory=PoseConfig)


def get_default_config_path() -> Path:
    return Path(__file__).resolve().parent / "config.json"


def _deep_get(d: Dict[str, Any], keys: list, default: Any = None) -> Any:
    cur: Any = d
    for k in keys:
        if not isinstance(cur, dict):
            return default
        cur = cur.get(k)
    return cur if cur is not None else default


def _as_int(v: Any, default: int) -> int:
    try:
        return int(v)
    except (TypeError, ValueError):
        return int(default)


def _as_float(v: Any, default: float) -> float:
    try:
        return float(v)
    except (TypeError, ValueError):
        return float(default)


def _as_str(v: Any, default: str = "") -> str:
    return str(v) if v is not None else str(default)


def _parse_table(v: Any) -> Tuple[str, ...]:
    if v is None:
        return DEFAULT_PITCHES
    try:
        return NoteTable(tuple(v)).pitches
    except (TypeError, ValueError) as e:
        logger.warning("Invalid note table in config (%s); using default %s", e, DEFAULT_PITCHES)
        return DEFAULT_PITCHES


def _parse_policy(v: Any) -> str:
    policy = _as_str(v, "release").strip().lower()
    if policy not in ("release", "hold"):
        logger.warning("Unknown incomplete_policy %r; using 'release'", v)
        return "release"
    return policy


def _parse_classifier_name(v: Any) -> str:
    name = _as_str(v, DEFAULT_CLASSIFIER).strip()
    if name not in CLASSIFIER_NAMES:
        logger.warning("Unknown classifier %r; using %r", v, DEFAULT_CLASSIFIER)
        return DEFAULT_CLASSIFIER
    return name


def parse_config(raw: Dict[str, Any]) -> AppConfig:
    d_cls = ClassifierConfig()
    d_notes = NotesConfig()
    d_cam = CameraConfig()
    d_pose = PoseConfig()

    classifier = ClassifierConfig(
        name=_parse_classifier_name(_deep_get(raw, ["classifier", "name"])),
        bend_max=_as_float(_deep_get(raw, ["classifier", "bend_max"]), d_cls.bend_max),
        straight_min=_as_float(_deep_get(raw, ["classifier", "straight_min"]), d_cls.straight_min),
        side_low=_as_float(_deep_get(raw, ["classifier", "side_low"]), d_cls.side_low),
        side_high=_as_float(_deep_get(raw, ["classifier", "side_high"]), d_cls.side_high),
    )
    notes = NotesConfig(
        table=_parse_table(_deep_get(raw, ["notes", "table"])),
        lookahead=_as_float(_deep_get(raw, ["notes", "lookahead"]), d_notes.lookahead),
    )
    session = SessionConfig(
        incomplete_policy=_parse_policy(_deep_get(raw, ["session", "incomplete_policy"])),
    )
    camera = CameraConfig(
        index=_as_int(_deep_get(raw, ["camera", "index"]), d_cam.index),
        width=_as_int(_deep_get(raw, ["camera", "width"]), d_cam.width),
        height=_as_int(_deep_get(raw, ["camera", "height"]), d_cam.height),
    )
    pose = PoseConfig(
        min_detection_confidence=_as_float(
            _deep_get(raw, ["pose", "min_detection_confidence"]), d_pose.min_detection_confidence
        ),
        min_tracking_confidence=_as_float(
            _deep_get(raw, ["pose", "min_tracking_confidence"]), d_pose.min_tracking_confidence
        ),
        visibility_threshold=_as_float(
            _deep_get(raw, ["pose", "visibility_threshold"]), d_pose.visibility_threshold
        ),
    )
    return AppConfig(classifier=classifier, notes=notes, session=session, camera=camera, pose=pose)


def load_config(path: Optional[Union[str, Path]] = None) -> AppConfig:
    p = Path(path).expanduser().resolve() if path else get_default_config_path()
    if not p.exists():
        # Defaults-only config.
        return AppConfig()
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Could not read config %s (%s); using defaults", p, e)
        return AppConfig()
    if not isinstance(raw, dict):
        logger.warning("Config %s is not a JSON object; using defaults", p)
        return AppConfig()
    return parse_config(raw)
