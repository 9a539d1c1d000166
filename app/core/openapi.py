"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter un titre, une description détaillée,

documenter les conventions (erreurs, pagination, authentification),

centraliser la personnalisation du Swagger.

🔹 Avantages :

La doc est toujours complète et cohérente.
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API de gestion d'utilisateurs et d'articles.\n\n"
            "### Conventions\n"
            "- Toutes les heures sont en UTC.\n"
            "- Pagination: query params `page` & `limit`.\n"
            "- Authentification: header `Authorization: Bearer <token>` (voir `/auth/login`).\n"
            "- Erreurs: `{\"error\": \"...\"}` ou `{\"error\": \"Validation failed\", \"details\": [...]}`.\n"
        ),
        routes=app.routes,
        tags=app.openapi_tags,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
