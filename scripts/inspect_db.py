"""users 테이블 전체를 JSON으로 출력. 로컬 검증용."""
import asyncio
import json
import os
import sys

_src_dir = os.path.dirname(os.path.abspath(__file__))
_project_root = os.path.dirname(_src_dir)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from app.core.database import get_engine, init_db, transaction
from app.repositories.user_repository import list_all
from app.schemas.user import UserResponse

# 윈도우 환경 asyncio 에러 방지
if sys.platform.startswith("win"):
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())


async def inspect() -> None:
    init_db()
    try:
        async with transaction() as session:
            users = await list_all(session)
            rows = [
                UserResponse.model_validate(u).model_dump(mode="json", by_alias=True)
                for u in users
            ]
    finally:
        engine = get_engine()
        if engine is not None:
            await engine.dispose()

    print("--- Current Database Content ---")
    print(json.dumps(rows, ensure_ascii=False, indent=2))
    print("--------------------------------")


if __name__ == "__main__":
    asyncio.run(inspect())
