import logging
import time
from dataclasses import dataclass
from typing import Iterator, Optional

import cv2
import numpy as np

logger = logging.getLogger(__name__)


@dataclass
class CameraFrame:
    frame: Optional[np.ndarray]
    timestamp: float
    ok: bool


class CameraStream:
    """Webcam reader. Always returns the latest frame; nothing is queued."""

    def __init__(self, camera_index: int = 0, width: int = 1280, height: int = 720):
        self.camera_index = camera_index
        self.width = width
        self.height = height
        self._capture: Optional[cv2.VideoCapture] = None

    def open(self) -> bool:
        self._capture = cv2.VideoCapture(self.camera_index)
        if not self._capture.isOpened():
            logger.error("Could not open camera %s", self.camera_index)
            self._capture = None
            return False
        self._capture.set(cv2.CAP_PROP_FRAME_WIDTH, self.width)
        self._capture.set(cv2.CAP_PROP_FRAME_HEIGHT, self.height)
        # Keep the driver buffer short so a slow consumer drops frames.
        self._capture.set(cv2.CAP_PROP_BUFFERSIZE, 1)
        return True

    def read(self) -> CameraFrame:
        if self._capture is None:
            return CameraFrame(None, time.time(), False)
        ok, frame = self._capture.read()
        now = time.time()
        if not ok:
            logger.warning("Camera %s returned no frame", self.camera_index)
            return CameraFrame(None, now, False)
        return CameraFrame(frame, now, True)

    def frames(self) -> Iterator[CameraFrame]:
        while self._capture is not None:
            cam_frame = self.read()
            if not cam_frame.ok:
                return
            yield cam_frame

    def release(self) -> None:
        if self._capture is not None:
            self._capture.release()
            self._capture = None
