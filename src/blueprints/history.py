from flask import Blueprint, request, jsonify
from api.history import HistoryManager, validate_tool_path
from discovery import Catalog


def create_history_blueprint(history_manager: HistoryManager, catalog: Catalog) -> Blueprint:
    history_bp = Blueprint('history', __name__)

    # History API Routes
    @history_bp.route('/api/history', methods=['GET'])
    def get_history():
        limit = request.args.get('limit', type=int)
        items = history_manager.to_list()
        if limit:
            items = items[:limit]

        return jsonify({
            'history': items,
            'count': len(items)
        })

    @history_bp.route('/api/history', methods=['POST'])
    def add_history():
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or 'path' not in data:
            return jsonify({'error': 'Missing path field'}), 400

        path = data['path']
        if not validate_tool_path(path):
            return jsonify({'error': 'Invalid tool path'}), 400

        tool = catalog.get_tool(path)
        if not tool:
            return jsonify({'error': f'Unknown tool: {path}'}), 404

        entry = history_manager.record(tool.path, tool.name, tool.icon)
        return jsonify({
            'success': True,
            'entry': entry.to_dict(),
            'message': 'History entry added'
        })

    @history_bp.route('/api/history', methods=['DELETE'])
    def clear_history():
        history_manager.clear()
        return jsonify({
            'success': True,
            'message': 'History cleared'
        })

    @history_bp.route('/api/history/stats')
    def history_stats():
        return jsonify(history_manager.get_stats())

    return history_bp
