"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter une description détaillée (auth, format des erreurs),

centraliser la personnalisation du Swagger.
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "Backend de gestion de médias personnels (notes & liens) : FastAPI + SQLite.\n\n"
            "### Conventions\n"
            "- Toutes les heures sont en UTC.\n"
            "- Auth : `POST /login` avec la clé partagée, puis `Authorization: Bearer <token>`.\n"
            "- Erreurs : toujours `{\"error\": \"<message>\"}`.\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
