import logging
from datetime import datetime
from typing import Optional

from flask import Flask, render_template_string, request, jsonify, abort

from config.settings import Settings, get_config_directory, load_settings
from discovery import Catalog, ToolSearch, load_default_catalog
from api.storage import LocalStorage, JsonFileStorage
from api.history import HistoryManager
from api.favorites import FavoritesManager
from api.share_analytics import ShareAnalyticsManager, ShareTrigger
from blueprints.search import create_search_blueprint
from blueprints.history import create_history_blueprint
from blueprints.favorites import create_favorites_blueprint
from blueprints.share import create_share_blueprint

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'

# Dashboard template
DASHBOARD_TEMPLATE = '''
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Developer Tools</title>
    <style>
        * {
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }
        body {
            font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            min-height: 100vh;
            color: #333;
        }
        .header {
            text-align: center;
            padding: 40px 20px;
            color: white;
        }
        .header h1 {
            font-size: 3em;
            margin-bottom: 10px;
            font-weight: 300;
        }
        .container {
            max-width: 1200px;
            margin: 0 auto;
            padding: 0 20px;
        }
        .search-box {
            width: 100%;
            max-width: 500px;
            margin: 0 auto 30px;
            display: block;
            padding: 15px 20px;
            font-size: 16px;
            border: none;
            border-radius: 50px;
            background: rgba(255, 255, 255, 0.95);
            outline: none;
        }
        .category h2 {
            color: white;
            font-weight: 400;
        }
        .category p.category-description {
            color: rgba(255, 255, 255, 0.8);
            margin-bottom: 15px;
        }
        .tools-grid {
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(300px, 1fr));
            gap: 20px;
            margin-bottom: 40px;
        }
        .tool-card {
            background: white;
            border-radius: 15px;
            padding: 25px;
            cursor: pointer;
        }
        .tool-card h3 {
            color: #2d3748;
            margin-bottom: 10px;
        }
        .tool-card p {
            color: #718096;
            line-height: 1.5;
        }
        .recent a {
            color: white;
            margin-right: 15px;
        }
        .no-results {
            text-align: center;
            padding: 40px;
            color: white;
        }
    </style>
</head>
<body>
    <div class="header">
        <h1>Developer Tools</h1>
        <p>Find the right utility for the job</p>
    </div>

    <div class="container">
        <form method="get" action="/">
            <input type="text" class="search-box" name="q" value="{{ query }}" placeholder="Search tools...">
        </form>

        {% if recent and not query %}
        <div class="recent">
            {% for item in recent %}
            <a href="/tools{{ item.path }}">{{ item.icon }} {{ item.name }}</a>
            {% endfor %}
        </div>
        {% endif %}

        {% for group in groups %}
        <div class="category">
            <h2>{{ group.title }}</h2>
            <p class="category-description">{{ group.description }}</p>
            <div class="tools-grid">
                {% for result in group.tools %}
                <div class="tool-card" onclick="window.location.href='/tools{{ result.path }}'">
                    <h3>{{ result.tool.icon }} {{ result.name }}{% if result.path in favorites %} ⭐{% endif %}</h3>
                    <p>{{ result.tool.description }}</p>
                </div>
                {% endfor %}
            </div>
        </div>
        {% else %}
        <div class="no-results">
            <h3>No tools found</h3>
            <p>Try adjusting your search terms</p>
        </div>
        {% endfor %}
    </div>
</body>
</html>
'''


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def create_app(settings: Optional[Settings] = None,
               storage: Optional[LocalStorage] = None,
               catalog: Optional[Catalog] = None) -> Flask:
    """Build the Flask app with one catalog, search engine and set of stores per process"""
    settings = settings or load_settings()
    if storage is None:
        storage_dir = settings.storage_dir or str(get_config_directory() / 'storage')
        storage = JsonFileStorage(storage_dir)
    catalog = catalog or load_default_catalog()

    tool_search = ToolSearch(catalog, settings)
    history_manager = HistoryManager(storage, settings.history_limit, settings.history_max_age_days)
    favorites_manager = FavoritesManager(storage, settings.favorites_limit)
    share_manager = ShareAnalyticsManager(storage, settings.share_log_limit)
    share_trigger = ShareTrigger(storage, settings.share_cooldown_seconds)

    app = Flask(__name__)
    app.config['DISCOVERY_SETTINGS'] = settings
    app.register_blueprint(create_search_blueprint(tool_search, favorites_manager))
    app.register_blueprint(create_history_blueprint(history_manager, catalog))
    app.register_blueprint(create_favorites_blueprint(favorites_manager, catalog))
    app.register_blueprint(create_share_blueprint(share_manager, share_trigger))

    @app.route('/')
    def dashboard():
        query = request.args.get('q', '')
        results = tool_search.set_query(query)
        return render_template_string(
            DASHBOARD_TEMPLATE,
            query=query,
            groups=tool_search.group(results),
            recent=history_manager.get_recent(5),
            favorites=set(favorites_manager.favorites)
        )

    # Tool Routes
    @app.route('/tools/<path:slug>')
    def serve_tool(slug):
        """Visiting a tool page records it in the history"""
        tool = catalog.get_tool('/' + slug)
        if not tool:
            abort(404)

        history_manager.record(tool.path, tool.name, tool.icon)
        return jsonify({
            'tool': tool.to_dict(),
            'category_description': catalog.category_description(tool.category),
            'breadcrumbs': catalog.breadcrumbs(tool.path),
            'favorite': favorites_manager.is_favorite(tool.path)
        })

    @app.route('/health')
    def health():
        return jsonify({
            'status': 'healthy',
            'timestamp': datetime.now().isoformat(),
            'tools_count': len(catalog),
            'history_stats': history_manager.get_stats(),
            'favorites_stats': favorites_manager.get_stats()
        })

    @app.errorhandler(404)
    def not_found(error):
        if request.path.startswith('/api/') or request.path.startswith('/tools/'):
            return jsonify({'error': 'Not found'}), 404
        return error

    logger.info("Tool discovery ready: %d tools in %d categories", len(catalog), len(catalog.categories))
    return app
