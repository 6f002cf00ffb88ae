from flask import Blueprint, request, jsonify
from discovery import ToolSearch
from api.favorites import FavoritesManager


def _is_truthy(value) -> bool:
    return str(value).lower() in ('1', 'true', 'yes', 'on')


def create_search_blueprint(tool_search: ToolSearch, favorites_manager: FavoritesManager) -> Blueprint:
    search_bp = Blueprint('search', __name__)

    @search_bp.route('/api/search', methods=['GET'])
    def search_tools():
        """Rank the catalog against a free-text query"""
        query = request.args.get('q', '')
        favorites = favorites_manager.favorites if _is_truthy(request.args.get('favorites_only', '')) else None

        results = tool_search.search(query, favorites)
        return jsonify({
            'query': query,
            'results': [result.to_dict() for result in results],
            'groups': [group.to_dict() for group in tool_search.group(results)],
            'count': len(results)
        })

    @search_bp.route('/api/tools')
    def api_tools():
        return jsonify({
            'categories': tool_search.catalog.to_list(),
            'tools_count': len(tool_search.catalog)
        })

    return search_bp
