"""HTTP client the trainer UI uses to read progress and submit attempts.

Every call returns a FetchResult instead of raising, so the UI can render
``data`` or ``error`` directly.
"""
import logging
from dataclasses import dataclass
from typing import Any

import requests

from liftplanner.services.scoring import build_feedback, is_passing, score_checklist

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10  # seconds


@dataclass
class FetchResult:
    data: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class TrainingClient:
    def __init__(self, base_url: str = "", session=None, timeout: float = DEFAULT_TIMEOUT):
        # session: requests.Session or anything with the same get/post signature
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _get(self, path: str, params: dict, failure: str, default: Any = None) -> FetchResult:
        try:
            response = self.session.get(self._url(path), params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("%s: %s", failure, exc)
            return FetchResult(data=default, error=str(exc))

        if response.status_code >= 400:
            logger.error("%s: HTTP %s", failure, response.status_code)
            return FetchResult(data=default, error=failure)

        try:
            data = response.json().get("data")
        except ValueError:
            # 2xx that is not JSON, e.g. a proxy error page
            logger.error("%s: response is not JSON", failure)
            return FetchResult(data=default, error=failure)
        return FetchResult(data=default if data is None else data)

    def fetch_progress(self, user_id: int | None) -> FetchResult:
        """Aggregated progress for a user; no request without a user."""
        if not user_id:
            return FetchResult()
        return self._get("/api/progress", {"userId": user_id}, "Failed to fetch progress")

    def fetch_attempts(self, user_id: int | None, scenario_id: int | None = None) -> FetchResult:
        if not user_id:
            return FetchResult(data=[])
        params = {"userId": user_id}
        if scenario_id:
            params["scenarioId"] = scenario_id
        return self._get("/api/attempts", params, "Failed to fetch attempts", default=[])

    def fetch_scenarios(self, difficulty: str | None = None, category: str | None = None) -> FetchResult:
        params = {}
        if difficulty:
            params["difficulty"] = difficulty
        if category:
            params["category"] = category
        return self._get("/api/scenarios", params, "Failed to fetch scenarios", default=[])

    def fetch_scenario(self, scenario_id: int | None) -> FetchResult:
        if not scenario_id:
            return FetchResult()
        return self._get(f"/api/scenarios/{scenario_id}", {}, "Failed to fetch scenario")

    def submit_attempt(
        self,
        user_id: int,
        scenario_id: int,
        *,
        selected_crane_id: str | None = None,
        crane_x: float | None = None,
        crane_y: float | None = None,
        capacity_checked: bool = False,
        radius_verified: bool = False,
        ground_bearing_checked: bool = False,
        obstacles_reviewed: bool = False,
        outriggers_checked: bool = False,
        score: int | None = None,
        passed: bool | None = None,
        total_time_seconds: int | None = None,
    ) -> FetchResult:
        """Record a finished session, scoring the checklist when score/passed are not given.

        The stored attempt comes back with ``feedback`` lines for the trainee.
        """
        if score is None:
            score = score_checklist(
                crane_positioned=crane_x is not None and crane_y is not None,
                capacity_checked=capacity_checked,
                radius_verified=radius_verified,
                ground_bearing_checked=ground_bearing_checked,
                obstacles_reviewed=obstacles_reviewed,
            )
        if passed is None:
            passed = is_passing(score)

        body = {
            "user_id": user_id,
            "scenario_id": scenario_id,
            "selected_crane_id": selected_crane_id,
            "crane_x": crane_x,
            "crane_y": crane_y,
            "capacity_checked": capacity_checked,
            "radius_verified": radius_verified,
            "ground_bearing_checked": ground_bearing_checked,
            "obstacles_reviewed": obstacles_reviewed,
            "outriggers_checked": outriggers_checked,
            "score": score,
            "passed": passed,
            "total_time_seconds": total_time_seconds,
        }
        try:
            response = self.session.post(self._url("/api/attempts"), json=body, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("Failed to create attempt: %s", exc)
            return FetchResult(error=str(exc))

        try:
            payload = response.json()
        except ValueError:
            payload = {}
        if response.status_code >= 400:
            return FetchResult(error=payload.get("error") or "Failed to create attempt")
        attempt = payload.get("data")
        if attempt is None:
            logger.error("Failed to create attempt: no attempt in response")
            return FetchResult(error="Failed to create attempt")
        attempt["feedback"] = build_feedback(
            attempt["passed"],
            capacity_checked=capacity_checked,
            radius_verified=radius_verified,
            ground_bearing_checked=ground_bearing_checked,
            obstacles_reviewed=obstacles_reviewed,
        )
        return FetchResult(data=attempt)
