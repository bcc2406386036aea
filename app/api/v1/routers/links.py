# app/api/v1/routers/links.py
from fastapi import APIRouter, Depends, Query, status

from app.api.v1.dependencies import get_link_service, require_auth
from app.features.links.schemas import LinkCreate, LinkCreatedOut, LinkListOut
from app.features.links.services import LinkService

router = APIRouter(
    prefix="/link",
    tags=["links"],
    dependencies=[Depends(require_auth)],
    responses={401: {"description": "Unauthorized"}},
)

@router.get(
    "",
    summary="Lister les liens",
    response_model=LinkListOut,
)
def list_links(svc: LinkService = Depends(get_link_service)):
    return svc.list()

@router.post(
    "",
    summary="Enregistrer un lien",
    status_code=status.HTTP_201_CREATED,
    response_model=LinkCreatedOut,
)
def create_link(payload: LinkCreate, svc: LinkService = Depends(get_link_service)):
    return svc.create(payload)

@router.delete(
    "",
    summary="Supprimer un lien",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_link(
    link_id: str = Query(..., alias="id", min_length=1),
    svc: LinkService = Depends(get_link_service),
):
    svc.delete(link_id)
    return None
