import base64
from functools import lru_cache
from io import BytesIO
import logging
import os
from pathlib import Path
import sys

from fastapi import FastAPI, File, HTTPException, Query, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from PIL import Image, UnidentifiedImageError
from pydantic import BaseModel, Field

# Ensure local src package is importable in serverless runtime.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from wine_lens.config import WineLensConfig  # noqa: E402
from wine_lens.core import recognize  # noqa: E402
from wine_lens.datasets import DatasetDownloader, DatasetSize  # noqa: E402
from wine_lens.exceptions import AuthenticationError, DatasetError, ImageError, RateLimitError  # noqa: E402
from wine_lens.schema import FoodCategory, WinePreferences, WineRecommendation, WineType  # noqa: E402
from wine_lens.service import WineLensService  # noqa: E402

app = FastAPI(title="wine-lens API", version="1.0.0")
logger = logging.getLogger(__name__)
CONFIG = WineLensConfig.from_env()

raw_origins = os.getenv("FRONTEND_ORIGINS", "*")
allow_origins = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]
MAX_IMAGE_BYTES = int(os.getenv("MAX_IMAGE_BYTES", str(8 * 1024 * 1024)))
ALLOWED_MIME_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/webp"}

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_service() -> WineLensService:
    service = WineLensService()
    if not CONFIG.auto_load:
        return service
    try:
        dataset = DatasetSize.parse(CONFIG.dataset)
    except ValueError:
        logger.warning("Unknown dataset %s, using keyword-only matching", CONFIG.dataset)
        return service
    files = DatasetDownloader(CONFIG.data_dir).cached_files(dataset)
    if files is None:
        return service
    try:
        service.load(files[0], files[1], CONFIG.cache_path, label=dataset.spec.label)
    except DatasetError as exc:
        # Status is reported as failed; keyword-only matching keeps working.
        logger.warning("Reference dataset unavailable: %s", exc)
    return service


@app.get("/health")
def health() -> dict[str, bool]:
    return {"ok": True}


class FoodOption(BaseModel):
    key: str
    label: str


class DatasetStatusResponse(BaseModel):
    status: str
    label: str
    wineCount: int
    error: str | None = None


class PreferencesPayload(BaseModel):
    maxPrice: int = Field(default=CONFIG.max_price, ge=0)
    ignoredGrapes: list[str] = Field(default_factory=list)
    allowedTypes: list[str] = Field(default_factory=list)


class RecommendRequest(BaseModel):
    text: str
    food: str
    preferences: PreferencesPayload | None = None


class RecommendImageRequest(BaseModel):
    imageBase64: str
    food: str
    preferences: PreferencesPayload | None = None


def _parse_food(raw: str) -> FoodCategory:
    try:
        return FoodCategory.parse(raw)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"invalid food: {raw}") from exc


def _to_preferences(payload: PreferencesPayload | None) -> WinePreferences:
    if payload is None:
        return CONFIG.default_preferences()
    try:
        allowed = {WineType.parse(item) for item in payload.allowedTypes} or set(WineType)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return WinePreferences(
        max_price=payload.maxPrice,
        ignored_grapes=set(payload.ignoredGrapes),
        allowed_types=allowed,
    )


def _validate_payload_size(payload: bytes) -> None:
    if len(payload) > MAX_IMAGE_BYTES:
        raise HTTPException(status_code=413, detail="image too large")


def _validate_multipart_content_type(content_type: str | None) -> None:
    if not content_type:
        raise HTTPException(status_code=400, detail="image file is required")
    normalized = content_type.split(";")[0].strip().lower()
    if normalized not in ALLOWED_MIME_TYPES:
        raise HTTPException(status_code=400, detail="unsupported image content type")


def _decode_base64_image(image_base64: str) -> bytes:
    value = image_base64.strip()
    if not value:
        raise HTTPException(status_code=400, detail="imageBase64 is required")

    # Support data URL format: data:image/jpeg;base64,<payload>
    if value.startswith("data:"):
        _, sep, value = value.partition(",")
        if not sep:
            raise HTTPException(status_code=400, detail="invalid imageBase64 data URL")

    try:
        payload = base64.b64decode(value, validate=True)
    except Exception as exc:
        raise HTTPException(status_code=400, detail="invalid imageBase64 encoding") from exc

    if not payload:
        raise HTTPException(status_code=400, detail="empty file")
    _validate_payload_size(payload)

    return payload


@app.get("/foods", response_model=list[FoodOption])
def foods() -> list[FoodOption]:
    return [FoodOption(key=item.value, label=item.display_name) for item in FoodCategory]


@app.get("/dataset/status", response_model=DatasetStatusResponse)
def dataset_status() -> DatasetStatusResponse:
    service = get_service()
    return DatasetStatusResponse(
        status=service.status.value,
        label=service.snapshot.label,
        wineCount=service.wine_count,
        error=service.last_error,
    )


@app.post("/recommend", response_model=WineRecommendation)
def recommend(body: RecommendRequest) -> WineRecommendation:
    food = _parse_food(body.food)
    preferences = _to_preferences(body.preferences)
    try:
        return get_service().recommend(body.text, food, preferences)
    except Exception as exc:
        logger.exception("recommend failed")
        raise HTTPException(status_code=500, detail="internal_error") from exc


@app.post("/recommend/image", response_model=WineRecommendation)
async def recommend_image(
    request: Request,
    image: UploadFile | None = File(default=None),
    food: str | None = Query(default=None),
) -> WineRecommendation:
    content_type = request.headers.get("content-type", "")
    preferences = CONFIG.default_preferences()

    if content_type.startswith("application/json"):
        try:
            body = RecommendImageRequest.model_validate(await request.json())
        except Exception as exc:
            raise HTTPException(status_code=400, detail="imageBase64 and food are required in JSON body") from exc
        payload = _decode_base64_image(body.imageBase64)
        food_category = _parse_food(body.food)
        preferences = _to_preferences(body.preferences)
    else:
        if image is None:
            raise HTTPException(status_code=400, detail="image file is required")
        if not food:
            raise HTTPException(status_code=400, detail="food is required")
        food_category = _parse_food(food)
        _validate_multipart_content_type(image.content_type)
        payload = await image.read()
        if not payload:
            raise HTTPException(status_code=400, detail="empty file")
        _validate_payload_size(payload)

    try:
        pil_image = Image.open(BytesIO(payload))
        ocr_result, metadata = recognize(pil_image, provider=CONFIG.provider)
        logger.info("recognized %d lines via %s", len(ocr_result.lines), metadata.get("provider"))
        return get_service().analyze_ocr(ocr_result, food_category, preferences)
    except UnidentifiedImageError as exc:
        raise HTTPException(status_code=400, detail="invalid image format") from exc
    except AuthenticationError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except RateLimitError as exc:
        raise HTTPException(status_code=429, detail=str(exc)) from exc
    except ImageError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("recommend image failed")
        raise HTTPException(status_code=500, detail="internal_error") from exc
