"""SIM implementation - hardcoded smoke scenario against the backend."""

import asyncio
import base64
from typing import Protocol

from ..app import Application
from ..errors import ClientError
from ..logging_config import get_logger
from ..models import first_result

logger = get_logger(__name__)

# 1x1 transparent PNG
SAMPLE_IMAGE = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)


class ISim(Protocol):
    """Drive the façades and the upload protocol end to end."""

    async def start(self) -> None:
        """Start hardcoded scenario."""
        ...

    async def stop(self) -> None:
        """Stop scenario."""
        ...


class Sim:
    """SIM with hardcoded scenario: user, group, memory, photo contribution."""

    def __init__(
        self,
        application: Application,
        username: str = "sim_user",
        password: str = "sim_password",
    ):
        self._app = application
        self._username = username
        self._password = password
        self._task: asyncio.Task | None = None
        self.last_result: dict | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Start hardcoded scenario in the background."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run_scenario())

    async def stop(self) -> None:
        """Stop scenario."""
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

    async def _run_scenario(self) -> None:
        try:
            self.last_result = await self.run_once()
        except ClientError as e:
            logger.error("SIM scenario failed: %s", e.message, extra={"context": e.to_dict()})
        except Exception as e:
            logger.error("SIM scenario error: %s", e)

    async def run_once(self) -> dict:
        """Run the scenario to completion and return the created ids."""
        app = self._app

        try:
            user = (await app.auth.login(self._username, self._password))["user"]
        except ClientError:
            user = (await app.auth.register(self._username, self._password))["user"]
        logger.info("SIM: signed in as %s", user)

        group = (await app.groups.create(user, "SIM group"))["group"]
        details = first_result(await app.groups.get_details(group))
        logger.info("SIM: group %s -> %s", group, details)

        memory = (await app.memories.create(user, group, "SIM memory"))["memory"]
        image = await app.uploads.upload(
            user,
            "sim.png",
            SAMPLE_IMAGE,
            content_type="image/png",
            memory=memory,
        )
        await app.memories.add_contribution(memory, user, "Uploaded by SIM", [image.permanent_url])
        logger.info("SIM: contribution added with %s", image.permanent_url)

        return {
            "user": user,
            "group": group,
            "memory": memory,
            "image": image.image_id,
            "url": image.permanent_url,
        }
