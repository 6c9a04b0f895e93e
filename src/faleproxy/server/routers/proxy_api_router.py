import logging
from flask import Blueprint, jsonify, request, current_app
from pydantic import ValidationError

from faleproxy.model import ProxyRequest

logger = logging.getLogger(__name__)

proxy_api_router = Blueprint('proxy_api_router', __name__)


# --- HELPER FUNCTIONS ---

def get_proxy_controller():
    """Retrieves the proxy controller from the Flask application context."""
    controller = current_app.config.get('PROXY_CONTROLLER')
    if not controller:
        raise RuntimeError("ProxyController is not set in app.config['PROXY_CONTROLLER']")
    return controller


def _read_payload() -> dict:
    """Accepts both JSON and form-encoded bodies."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


# --- API ROUTES ---

@proxy_api_router.route('/fetch', methods=['POST'])
def fetch_and_rewrite():
    """
    Fetches the page at the posted 'url' and returns it with the
    configured word rewritten in its visible text.
    """
    try:
        payload = ProxyRequest.model_validate(_read_payload())
    except ValidationError:
        payload = ProxyRequest()

    if not payload.url:
        return jsonify({"error": "URL is required"}), 400

    try:
        response = get_proxy_controller().proxy(payload.url)
        return jsonify(response.model_dump(by_alias=True))
    except Exception as e:
        logger.error("Error fetching URL %s: %s", payload.url, e)
        return jsonify({"error": f"Failed to fetch content: {e}"}), 500
