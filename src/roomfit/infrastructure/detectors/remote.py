"""Object detection through a remote DETR-style inference endpoint.

The endpoint receives a base64-encoded camera frame and answers with a
list of detections::

    [{"label": "person", "score": 0.97,
      "box": {"xmin": 12, "ymin": 40, "xmax": 210, "ymax": 380}}, ...]

Box coordinates are in frame pixels and are scaled to the viewport.
"""

from __future__ import annotations

import base64
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import httpx

from roomfit.contracts import DetectorError
from roomfit.domain.value_objects import Region, RegionClassification, Viewport

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api-inference.huggingface.co/models/facebook/detr-resnet-50"
CLEAR_LABELS: frozenset[str] = frozenset({"floor"})

DETECTOR_NAME = "remote"


@dataclass(frozen=True)
class Frame:
    """A captured camera frame.

    Attributes:
        data: Encoded image bytes (JPEG or PNG).
        width: Frame width in pixels.
        height: Frame height in pixels.
    """

    data: bytes
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Frame dimensions must be positive")


FrameSource = Callable[[], Awaitable[Frame]]


def file_frame_source(path: Path, width: int, height: int) -> FrameSource:
    """Frame source that re-reads an image file on every capture.

    Stands in for a camera when replaying a recorded frame; the caller
    supplies the frame size since the image is never decoded here.
    """

    async def capture() -> Frame:
        return Frame(data=path.read_bytes(), width=width, height=height)

    return capture


class HttpObjectDetector:
    """Detector backed by an HTTP inference endpoint.

    Attributes:
        endpoint: URL the frame is POSTed to.
        image_source: Coroutine function returning the current frame.
        viewport: Screen the detections are scaled to.
        token: Optional bearer token for the endpoint.
        timeout: Request timeout in seconds.

    Example:
        >>> detector = HttpObjectDetector(DEFAULT_ENDPOINT, camera.capture, viewport)
        >>> regions = await detector.detect_now()
    """

    def __init__(
        self,
        endpoint: str,
        image_source: FrameSource,
        viewport: Viewport,
        token: str | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.endpoint = endpoint
        self.image_source = image_source
        self.viewport = viewport
        self.token = token
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def detect_now(self) -> list[Region]:
        """Capture a frame, send it for inference and convert the detections.

        Raises:
            DetectorError: If the frame cannot be captured, the request
                fails, or the response is not a list of detections.
        """
        try:
            frame = await self.image_source()
        except DetectorError:
            raise
        except Exception as e:
            raise DetectorError(f"Frame capture failed: {e}", DETECTOR_NAME) from e

        payload = {"inputs": base64.b64encode(frame.data).decode("ascii")}
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.endpoint,
                    json=payload,
                    headers=self._headers(),
                    timeout=self.timeout,
                )
        except httpx.TimeoutException as e:
            raise DetectorError(
                f"Timeout contacting {self.endpoint}", DETECTOR_NAME
            ) from e
        except httpx.RequestError as e:
            raise DetectorError(f"Request failed: {e}", DETECTOR_NAME) from e

        if response.status_code != 200:
            raise DetectorError(
                f"Endpoint returned status {response.status_code}", DETECTOR_NAME
            )

        try:
            detections = response.json()
        except ValueError as e:
            raise DetectorError("Response is not valid JSON", DETECTOR_NAME) from e

        regions = parse_detections(detections, frame, self.viewport)
        logger.debug(f"Remote detector returned {len(regions)} regions")
        return regions


def parse_detections(
    detections: Any, frame: Frame, viewport: Viewport
) -> list[Region]:
    """Convert endpoint detections to regions in viewport coordinates.

    Raises:
        DetectorError: If the payload does not have the expected shape.
    """
    if not isinstance(detections, list):
        raise DetectorError("Expected a list of detections", DETECTOR_NAME)

    sx = viewport.width / frame.width
    sy = viewport.height / frame.height
    regions: list[Region] = []
    for index, detection in enumerate(detections):
        try:
            label = str(detection["label"])
            score = float(detection["score"])
            box = detection["box"]
            xmin, ymin = float(box["xmin"]), float(box["ymin"])
            xmax, ymax = float(box["xmax"]), float(box["ymax"])
        except (KeyError, TypeError, ValueError) as e:
            raise DetectorError(
                f"Malformed detection at index {index}: {e}", DETECTOR_NAME
            ) from e

        classification = (
            RegionClassification.CLEAR
            if label.lower() in CLEAR_LABELS
            else RegionClassification.OBSTACLE
        )
        regions.append(
            Region(
                x=xmin * sx,
                y=ymin * sy,
                width=(xmax - xmin) * sx,
                height=(ymax - ymin) * sy,
                classification=classification,
                confidence=score,
                label=label,
            )
        )
    return regions
