from fastapi import APIRouter, Depends, Query

from expedition.api.v1.schemas import ContentResponseSchema, PackSchema
from expedition.application.ports.content import ContentPort
from expedition.wiring.dependencies import get_content_store

router = APIRouter()


@router.get("/content/{lang}", response_model=ContentResponseSchema)
def get_content(lang: str, content: ContentPort = Depends(get_content_store)):
    language = content.resolve_language(lang)
    return ContentResponseSchema(language=language, content=content.get_page(language))


@router.get("/packs", response_model=list[PackSchema])
def list_packs(lang: str | None = Query(None), content: ContentPort = Depends(get_content_store)):
    return [
        PackSchema(
            variant=p.variant,
            title=p.title,
            price=p.price,
            price_value=p.price_value,
            description=p.description,
            features=list(p.features),
        )
        for p in content.get_packs(content.resolve_language(lang))
    ]
