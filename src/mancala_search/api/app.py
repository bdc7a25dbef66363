from flask import Flask
from flask_smorest import Api
from flask_cors import CORS
from mancala_search.api.routes import bp

def create_app():
    app = Flask(__name__)

    # smorest serves both the spec (/openapi.json) and Swagger UI (/apidocs)
    app.config.update(
        API_TITLE="Mancala Chain Search",
        API_VERSION="v1",
        OPENAPI_VERSION="3.0.3",
        OPENAPI_URL_PREFIX="/",
        OPENAPI_JSON_PATH="openapi.json",
        OPENAPI_SWAGGER_UI_PATH="/apidocs",
        OPENAPI_SWAGGER_UI_URL="https://cdn.jsdelivr.net/npm/swagger-ui-dist/",
    )

    api = Api(app)
    api.register_blueprint(bp)   # /api/search, /api/move, /api/health

    # local UI dev server only
    CORS(app, resources={r"/api/*": {"origins": ["http://localhost:5173", "http://127.0.0.1:5173"]}})
    return app
