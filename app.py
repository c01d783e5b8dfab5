import logging

import argh

from camera import CameraStream
from classifier_registry import get_classifier
from config import load_config
from note_sinks import LoggingNoteSink
from note_trigger import NoteTrigger
from pose_detection import PoseDetector
from session import DabSession

logger = logging.getLogger(__name__)


def main(
    config: str = "",
    classifier: str = "",
    camera_index: int = -1,
    max_frames: int = 0,
    log_level: str = "INFO",
):
    """
    Play notes by dabbing at the webcam.

    Args:
        config: Path to a JSON config file (defaults to config.json next to this file)
        classifier: Classifier name, overrides the config ("limb_vote" or "chicken_wing")
        camera_index: Camera index, overrides the config when >= 0
        max_frames: Stop after this many frames (0 runs until the camera stops or Ctrl-C)
        log_level: Logging level name
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = load_config(config or None)

    cls_cfg = cfg.classifier
    try:
        dab_classifier = get_classifier(
            classifier or cls_cfg.name,
            limb_vote=cls_cfg.limb_vote_thresholds(),
            chicken_wing=cls_cfg.chicken_wing_thresholds(),
        )
    except KeyError as e:
        logger.error("%s", e.args[0])
        raise SystemExit(2)

    index = camera_index if camera_index >= 0 else cfg.camera.index
    camera = CameraStream(camera_index=index, width=cfg.camera.width, height=cfg.camera.height)
    if not camera.open():
        logger.error("Could not open webcam %s", index)
        raise SystemExit(1)

    detector = PoseDetector(
        min_detection_confidence=cfg.pose.min_detection_confidence,
        min_tracking_confidence=cfg.pose.min_tracking_confidence,
        visibility_threshold=cfg.pose.visibility_threshold,
    )
    session = DabSession(
        dab_classifier,
        note_table=cfg.notes.note_table(),
        trigger=NoteTrigger(lookahead=cfg.notes.lookahead),
        sink=LoggingNoteSink(),
        incomplete_policy=cfg.session.incomplete_policy,
    )
    logger.info(
        "Running %s classifier, notes %s, incomplete frames: %s",
        dab_classifier.name,
        " ".join(session.note_table.pitches),
        session.incomplete_policy,
    )

    try:
        with session:
            for cam_frame in camera.frames():
                frame = detector.process(cam_frame.frame, cam_frame.timestamp)
                session.handle_frame(frame)
                if max_frames and session.frame_count >= max_frames:
                    break
    except KeyboardInterrupt:
        logger.info("Stopped by user")
    finally:
        camera.release()
        detector.close()
    logger.info("Processed %d frames", session.frame_count)


def run():
    argh.dispatch_command(main)


if __name__ == "__main__":
    run()
