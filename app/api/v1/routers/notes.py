"""
➡️ But : Définir les endpoints /note de l'API.

Chaque route passe par require_auth avant d'appeler NoteService.
Les routes ne contiennent ni SQL ni logique métier.
"""

from fastapi import APIRouter, Depends, Query, status

from app.api.v1.dependencies import get_note_service, require_auth
from app.features.notes.schemas import (
    NoteCreate,
    NoteUpdate,
    NoteCreatedOut,
    NoteUpdatedOut,
    NoteListOut,
)
from app.features.notes.services import NoteService

router = APIRouter(
    prefix="/note",
    tags=["notes"],
    dependencies=[Depends(require_auth)],
    responses={401: {"description": "Unauthorized"}},
)

@router.get(
    "",
    summary="Lister les notes",
    description="Toutes les notes, de la plus récente à la plus ancienne.",
    response_model=NoteListOut,
)
def list_notes(svc: NoteService = Depends(get_note_service)):
    return svc.list()

@router.post(
    "",
    summary="Créer une note",
    status_code=status.HTTP_201_CREATED,
    response_model=NoteCreatedOut,
)
def create_note(payload: NoteCreate, svc: NoteService = Depends(get_note_service)):
    return svc.create(payload)

@router.put(
    "",
    summary="Modifier le texte d'une note",
    response_model=NoteUpdatedOut,
    responses={404: {"description": "Note introuvable"}},
)
def update_note(payload: NoteUpdate, svc: NoteService = Depends(get_note_service)):
    return svc.update(payload)

@router.delete(
    "",
    summary="Supprimer une note",
    description="Idempotent : supprimer un id absent renvoie aussi 204.",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_note(
    note_id: str = Query(..., alias="id", min_length=1),
    svc: NoteService = Depends(get_note_service),
):
    svc.delete(note_id)
    return None
