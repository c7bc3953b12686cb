from typing import Any

import aiohttp


def fake_matched_user(
    counts: dict[str, int] | None = None,
    percentages: dict[str, float | None] | None = None,
) -> dict[str, Any]:
    if counts is None:
        counts = {"All": 330, "Easy": 150, "Medium": 140, "Hard": 40}
    if percentages is None:
        percentages = {"Easy": 92.4, "Medium": 88.1, "Hard": 71.25}
    return {
        "problemsSolvedBeatsStats": [
            {"difficulty": difficulty, "percentage": percentage}
            for difficulty, percentage in percentages.items()
        ],
        "submitStatsGlobal": {
            "acSubmissionNum": [
                {"difficulty": difficulty, "count": count}
                for difficulty, count in counts.items()
            ]
        },
    }


def fake_graphql_response(matched_user: dict[str, Any] | None) -> dict[str, Any]:
    return {
        "data": {
            "allQuestionsCount": [
                {"difficulty": "All", "count": 3200},
                {"difficulty": "Easy", "count": 820},
                {"difficulty": "Medium", "count": 1700},
                {"difficulty": "Hard", "count": 680},
            ],
            "matchedUser": matched_user,
        }
    }


class FakeResponse:
    def __init__(
        self,
        body: Any = None,
        status: int = 200,
        content_type: str = "application/json",
        json_error: Exception | None = None,
    ):
        self.body = body
        self.status = status
        self.content_type = content_type
        self.json_error = json_error

    async def json(self):
        if self.json_error is not None:
            raise self.json_error
        return self.body

    async def text(self):
        return str(self.body)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False


class FakeSession:
    """
    Stands in for aiohttp.ClientSession.post. `responses` maps a username to a
    FakeResponse, or to an exception raised when the request is made.
    """

    def __init__(self, responses: dict[str, FakeResponse | Exception]):
        self.responses = responses
        self.requests: list[dict[str, Any]] = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False

    def post(self, url, json=None, headers=None):
        self.requests.append({"url": url, "json": json, "headers": headers})
        response = self.responses[json["variables"]["username"]]
        if isinstance(response, Exception):
            raise response
        return response


def fake_session_for(*usernames: str) -> FakeSession:
    return FakeSession(
        {
            username: FakeResponse(fake_graphql_response(fake_matched_user()))
            for username in usernames
        }
    )


def connection_error() -> aiohttp.ClientError:
    return aiohttp.ClientConnectionError("connection reset by peer")
