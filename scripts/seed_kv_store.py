"""
SQLite 설정 저장소 시드 스크립트

YAML 파일의 key: url 매핑을 kv_entries 테이블에 upsert 합니다.
디스패처는 저장소를 읽기만 하므로 값 등록/변경은 이 스크립트로 합니다.

사용법:
    python scripts/seed_kv_store.py config/kv_seed.example.yaml
    python scripts/seed_kv_store.py values.yaml --db data/kv.db
"""

import argparse
import asyncio
import sys
from pathlib import Path

import aiosqlite
import yaml

# 프로젝트 루트 경로 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from store.sqlite import load_queries


async def seed(db_path: Path, values: dict[str, str]) -> None:
    queries = load_queries()
    db_path.parent.mkdir(parents=True, exist_ok=True)

    async with aiosqlite.connect(db_path) as conn:
        await queries.create_schema(conn)
        for key, value in values.items():
            await queries.put_value(conn, key=key, value=value)
            print(f"Upserted: {key} -> {value}")
        await conn.commit()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the maintd key-value store")
    parser.add_argument("values_file", help="YAML file with key: url pairs")
    parser.add_argument("--db", default="data/kv.db", help="SQLite store path (default: data/kv.db)")
    args = parser.parse_args()

    with open(args.values_file, encoding="utf-8") as f:
        values = yaml.safe_load(f) or {}

    if not isinstance(values, dict):
        print("Error: values file must contain a mapping", file=sys.stderr)
        sys.exit(1)

    asyncio.run(seed(Path(args.db), {str(k): str(v) for k, v in values.items()}))


if __name__ == "__main__":
    main()
