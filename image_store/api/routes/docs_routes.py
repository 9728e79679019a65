# image_store/api/routes/docs_routes.py

from flask import Blueprint, Response, jsonify

from image_store.api.openapi import API_TITLE, API_VERSION, build_openapi_document

bp_docs = Blueprint("docs", __name__)

_SWAGGER_HTML = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8" />
  <title>{title}</title>
  <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@5/swagger-ui.css" />
</head>
<body>
  <div id="swagger-ui"></div>
  <script src="https://unpkg.com/swagger-ui-dist@5/swagger-ui-bundle.js"></script>
  <script>
    window.ui = SwaggerUIBundle({{ url: "{spec_url}", dom_id: "#swagger-ui" }});
  </script>
</body>
</html>
"""


@bp_docs.get("/")
def index():
    return jsonify(
        {
            "message": API_TITLE,
            "version": API_VERSION,
            "endpoints": {"docs": "/docs", "api": "/api"},
        }
    ), 200


@bp_docs.get("/api/openapi.json")
def openapi_json():
    return jsonify(build_openapi_document()), 200


@bp_docs.get("/docs")
def swagger_ui():
    html = _SWAGGER_HTML.format(title=API_TITLE, spec_url="/api/openapi.json")
    return Response(html, mimetype="text/html")
