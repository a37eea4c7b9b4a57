from __future__ import annotations

import asyncio

from update_notify.paths import get_npm_command, is_windows
from update_notify.ports.registry_gateway import (
    RegistryGateway,
    RegistryGatewayCause,
    RegistryGatewayError,
)


class NpmRegistryGateway(RegistryGateway):
    def __init__(
        self, *, npm_command: str | None = None, timeout: float | None = None
    ) -> None:
        self._npm_command = npm_command
        self._timeout = timeout

    async def ping(self) -> bool:
        try:
            returncode, _, _ = await self._run("ping", detached=False)
        except RegistryGatewayError:
            return False
        return returncode == 0

    async def fetch_dist_tag(self, package_name: str, dist_tag: str) -> str:
        returncode, stdout, stderr = await self._run(
            "info", package_name, f"dist-tags.{dist_tag}", detached=not is_windows()
        )

        if stderr:
            raise RegistryGatewayError(
                cause=RegistryGatewayCause.ERROR_OUTPUT, message=stderr.strip() or None
            )

        if returncode != 0:
            raise RegistryGatewayError(cause=RegistryGatewayCause.COMMAND_FAILED)

        if not (version := stdout.strip()):
            raise RegistryGatewayError(cause=RegistryGatewayCause.EMPTY_RESULT)

        return version

    async def _run(self, *args: str, detached: bool) -> tuple[int, str, str]:
        command = self._npm_command or get_npm_command()
        try:
            process = await asyncio.create_subprocess_exec(
                command,
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                stdin=asyncio.subprocess.DEVNULL,
                start_new_session=detached,
            )
        except FileNotFoundError as exc:
            raise RegistryGatewayError(
                cause=RegistryGatewayCause.COMMAND_NOT_FOUND
            ) from exc
        except OSError as exc:
            raise RegistryGatewayError(cause=RegistryGatewayCause.COMMAND_FAILED) from exc

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(), timeout=self._timeout
            )
        except TimeoutError as exc:
            await _terminate(process)
            raise RegistryGatewayError(cause=RegistryGatewayCause.TIMEOUT) from exc
        except asyncio.CancelledError:
            await _terminate(process)
            raise

        return (
            process.returncode or 0,
            stdout.decode(errors="replace"),
            stderr.decode(errors="replace"),
        )


async def _terminate(process: asyncio.subprocess.Process) -> None:
    if process.returncode is not None:
        return
    try:
        process.kill()
    except ProcessLookupError:
        return
    await process.wait()
