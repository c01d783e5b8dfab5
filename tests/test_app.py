import pytest

pytest.importorskip("cv2")
pytest.importorskip("mediapipe")

import app  # noqa: E402


class ClosedCamera:
    def __init__(self, camera_index=0, width=1280, height=720):
        self.camera_index = camera_index

    def open(self):
        return False


def test_camera_failure_exits_non_zero(tmp_path, monkeypatch):
    monkeypatch.setattr(app, "CameraStream", ClosedCamera)
    with pytest.raises(SystemExit) as exc:
        app.main(config=str(tmp_path / "missing.json"))
    assert exc.value.code == 1


def test_unknown_classifier_option_exits(tmp_path, monkeypatch):
    monkeypatch.setattr(app, "CameraStream", ClosedCamera)
    with pytest.raises(SystemExit) as exc:
        app.main(config=str(tmp_path / "missing.json"), classifier="semaphore")
    assert exc.value.code == 2
