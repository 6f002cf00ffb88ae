from collections import Counter
from flask import Blueprint, request, jsonify
from api.history import sanitize_data
from api.share_analytics import ShareAnalyticsManager, ShareTrigger


def create_share_blueprint(share_manager: ShareAnalyticsManager, share_trigger: ShareTrigger) -> Blueprint:
    share_bp = Blueprint('share', __name__)

    @share_bp.route('/api/share', methods=['POST'])
    def track_share():
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not data:
            return jsonify({'error': 'No data provided'}), 400

        missing = [field for field in ('tool_name', 'platform', 'url') if not data.get(field)]
        if missing:
            return jsonify({'error': f'Missing fields: {", ".join(missing)}'}), 400

        try:
            event = share_manager.record(
                sanitize_data(data['tool_name'], 256),
                sanitize_data(data['platform'], 64),
                sanitize_data(data['url'])
            )
        except ValueError as e:
            return jsonify({'error': str(e)}), 400

        return jsonify({'success': True, 'event': event.to_dict()})

    @share_bp.route('/api/share/stats', methods=['GET'])
    def share_stats():
        """Share log plus per-platform and per-tool counts"""
        events = share_manager.stats()
        return jsonify({
            'events': [event.to_dict() for event in events],
            'count': len(events),
            'by_platform': dict(Counter(event.platform for event in events)),
            'by_tool': dict(Counter(event.tool_name for event in events))
        })

    @share_bp.route('/api/share/prompt', methods=['GET'])
    def share_prompt():
        tool_name = request.args.get('tool', '')
        if not tool_name:
            return jsonify({'error': 'Missing tool parameter'}), 400
        return jsonify({'tool': tool_name, 'show': share_trigger.should_prompt(tool_name)})

    @share_bp.route('/api/share/prompt/dismiss', methods=['POST'])
    def dismiss_share_prompt():
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not data.get('tool_name'):
            return jsonify({'error': 'Missing tool_name field'}), 400

        share_trigger.dismiss(str(data['tool_name']))
        return jsonify({'success': True})

    return share_bp
