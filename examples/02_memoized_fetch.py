from __future__ import annotations

import asyncio

from _infra import banner, run
from kungfu import Error, Ok

from funkit import memoize_async
from funkit import maybe as M
from funkit.combinator import pipe_async


@memoize_async
async def fetch_profile(user_id: int) -> dict[str, object]:
    print(f"  fetching profile {user_id}")
    await asyncio.sleep(0.01)
    return {"id": user_id, "name": f"User {user_id}", "bio": None}


async def main() -> None:
    banner("02_memoized_fetch: memoize_async + pipe_async + Result")

    describe = pipe_async(
        fetch_profile,
        lambda profile: M.safe_get(profile, "bio"),
        lambda bio: M.to_result(bio, error=lambda: "no bio yet"),
    )

    for user_id in (1, 1, 2):
        match await describe(user_id):
            case Ok(bio):
                print(f"  {user_id}: {bio}")
            case Error(reason):
                print(f"  {user_id}: {reason}")

    print(" ", fetch_profile.cache_info())


if __name__ == "__main__":
    run(main)
