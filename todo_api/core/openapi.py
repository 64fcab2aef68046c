"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter une description détaillée (conventions de l'API).

Le schéma de sécurité bearer ("HTTPBearer") est déclaré automatiquement par FastAPI
via Security(bearer_scheme) dans todo_api.api.dependencies.
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API TODO multi-utilisateurs (FastAPI + SQLModel).\n\n"
            "### Conventions\n"
            "- Toutes les heures sont en UTC.\n"
            "- Réponses : `{success, message, data?, error?, count?}`.\n"
            "- Routes `/todos` : header `Authorization: Bearer <token>` obtenu via `/login`.\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
