import logging
from flask import Blueprint, send_from_directory

from faleproxy.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

# Blueprint for the static front-end
page_router = Blueprint('page_router', __name__)


@page_router.route('/')
def index():
    """Serves the single-page front-end that drives POST /fetch."""
    return send_from_directory(PathUtils.get_static_dir(), 'index.html')
