from flask import Blueprint, request, jsonify
from api.favorites import FavoritesManager
from api.history import validate_tool_path
from discovery import Catalog


def create_favorites_blueprint(favorites_manager: FavoritesManager, catalog: Catalog) -> Blueprint:
    favorites_bp = Blueprint('favorites', __name__)

    @favorites_bp.route('/api/favorites', methods=['GET'])
    def get_favorites():
        paths = favorites_manager.favorites
        tools = [catalog.get_tool(path) for path in paths]
        return jsonify({
            'favorites': paths,
            'tools': [tool.to_dict() for tool in tools if tool],
            'count': len(paths)
        })

    @favorites_bp.route('/api/favorites/toggle', methods=['POST'])
    def toggle_favorite():
        """Toggle favorite status for a tool"""
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or 'path' not in data:
            return jsonify({'error': 'Missing path field'}), 400

        path = data['path']
        if not validate_tool_path(path):
            return jsonify({'error': 'Invalid tool path'}), 400
        if path not in catalog:
            return jsonify({'error': f'Unknown tool: {path}'}), 404

        favorite = favorites_manager.toggle(path)
        return jsonify({
            'success': True,
            'path': path,
            'favorite': favorite,
            'message': f'Tool {"added to" if favorite else "removed from"} favorites'
        })

    @favorites_bp.route('/api/favorites', methods=['DELETE'])
    def clear_favorites():
        favorites_manager.clear()
        return jsonify({
            'success': True,
            'message': 'Favorites cleared'
        })

    return favorites_bp
