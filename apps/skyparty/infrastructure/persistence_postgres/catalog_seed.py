"""Character catalog seed loader.

패키지에 포함된 CSV에서 기본 카탈로그를 읽어 Character 엔티티로 변환합니다.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from apps.skyparty.domain.constants import MAX_CREDIT_AMOUNT
from apps.skyparty.domain.entities import Character

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_CSV_PATH = DATA_DIR / "character_catalog.csv"
REQUIRED_COLUMNS = {"id", "name", "price"}


def _parse_catalog_row(row: dict, idx: int) -> Character | None:
    """CSV 행을 Character로 변환. 유효하지 않으면 None 반환."""
    character_id = (row.get("id") or "").strip()
    name = (row.get("name") or "").strip()
    raw_price = (row.get("price") or "").strip()

    if (
        not character_id
        or not name
        or not raw_price.isdigit()
        or int(raw_price) > MAX_CREDIT_AMOUNT
    ):
        logger.warning("Skipping catalog row", extra={"row": idx})
        return None

    return Character(
        id=character_id,
        name=name,
        icon=(row.get("icon") or "").strip(),
        description=(row.get("description") or "").strip(),
        price=int(raw_price),
        rarity=(row.get("rarity") or "common").strip(),
        category=(row.get("category") or "character").strip(),
    )


def load_catalog(csv_path: Path = DEFAULT_CSV_PATH) -> list[Character]:
    """CSV 파일에서 카탈로그를 읽습니다.

    Raises:
        FileNotFoundError: CSV 파일 없음
        ValueError: 필수 컬럼 누락
    """
    with csv_path.open("r", encoding="utf-8-sig", newline="") as file_obj:
        reader = csv.DictReader(file_obj)
        if reader.fieldnames is None or not REQUIRED_COLUMNS.issubset(set(reader.fieldnames)):
            raise ValueError(f"CSV must contain columns: {', '.join(sorted(REQUIRED_COLUMNS))}")

        return [
            character
            for idx, row in enumerate(reader, start=1)
            if (character := _parse_catalog_row(row, idx)) is not None
        ]
