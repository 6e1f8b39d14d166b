"""
Flask web application for the Tournament Bracket Builder.

The builder draft (settings, team list and generated seeds) is kept in the
client session. Every response recomputes groups and bracket from scratch.
"""
import os
import logging
import yaml
from flask import Flask, request, jsonify, session
from core.models import Team
from core.builder import (
    InsufficientTeamsError,
    get_default_settings,
    normalize_settings,
    create_initial_teams,
    resize_teams,
    rename_team,
    rename_seeded_team,
    generate_seeds,
    build_preview,
)

app = Flask(__name__)
app.logger.setLevel(logging.INFO)


def _get_or_create_secret_key() -> bytes:
    """Get SECRET_KEY from env, or generate and persist to file."""
    env_key = os.environ.get('SECRET_KEY')
    if env_key:
        return env_key.encode() if isinstance(env_key, str) else env_key
    key_file = os.path.join(DATA_DIR, '.secret_key')
    if os.path.exists(key_file):
        with open(key_file, 'rb') as f:
            return f.read()
    key = os.urandom(24)
    os.makedirs(os.path.dirname(key_file), exist_ok=True)
    with open(key_file, 'wb') as f:
        f.write(key)
    return key


BASE_DIR = os.path.dirname(os.path.dirname(__file__))
DATA_DIR = os.environ.get('TOURNAMENT_DATA_DIR', os.path.join(BASE_DIR, 'data'))
BUILDER_FILE = os.path.join(DATA_DIR, 'builder.yaml')

app.secret_key = _get_or_create_secret_key()

DRAFT_KEY = 'builder_draft'


def load_builder_defaults() -> dict:
    """Load builder defaults from YAML file, merging with built-in defaults."""
    defaults = get_default_settings()
    if not os.path.exists(BUILDER_FILE):
        return defaults
    try:
        with open(BUILDER_FILE, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        app.logger.warning(f'Failed to parse {BUILDER_FILE}: {e}')
        return defaults
    if not isinstance(data, dict):
        return defaults
    return normalize_settings(data, defaults)


def _new_draft() -> dict:
    settings = load_builder_defaults()
    return {
        'settings': settings,
        'teams': [t.to_dict() for t in create_initial_teams(settings['participants'])],
        'seeded_teams': [],
    }


def load_draft() -> dict:
    """Return the session draft, creating one from defaults if missing."""
    draft = session.get(DRAFT_KEY)
    if not draft:
        draft = _new_draft()
        save_draft(draft)
    return draft


def save_draft(draft: dict):
    session[DRAFT_KEY] = draft


def _teams(draft: dict) -> list:
    return [Team.from_dict(t) for t in draft['teams']]


def _state_response(draft: dict, **extra):
    teams = _teams(draft)
    payload = {
        'success': True,
        'settings': draft['settings'],
        'teams': draft['teams'],
        **build_preview(teams, draft['settings'], draft['seeded_teams']),
    }
    payload.update(extra)
    return jsonify(payload)


@app.route('/api/builder', methods=['GET'])
def api_builder_state():
    """Current draft with its groups and bracket preview."""
    return _state_response(load_draft())


@app.route('/api/builder/settings', methods=['POST'])
def api_update_builder_settings():
    """AJAX endpoint for updating builder settings."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'success': False, 'error': 'No data provided'}), 400

    draft = load_draft()
    merged = {**draft['settings'], **data}
    settings = normalize_settings(merged, load_builder_defaults())
    teams = resize_teams(_teams(draft), settings['participants'])

    draft['settings'] = settings
    draft['teams'] = [t.to_dict() for t in teams]
    save_draft(draft)
    return _state_response(draft)


@app.route('/api/builder/teams/rename', methods=['POST'])
def api_rename_builder_team():
    """AJAX endpoint for renaming a team from the bracket view."""
    data = request.get_json(silent=True) or {}
    new_name = str(data.get('name') or '').strip()
    try:
        team_id = int(data.get('team_id'))
    except (TypeError, ValueError):
        return jsonify({'success': False, 'error': 'Valid team id is required.'}), 400

    if not new_name:
        return jsonify({'success': False, 'error': 'Team name is required.'}), 400

    draft = load_draft()
    teams = _teams(draft)
    if not any(t.id == team_id for t in teams):
        return jsonify({'success': False, 'error': 'Team not found.'}), 404

    draft['teams'] = [t.to_dict() for t in rename_team(teams, team_id, new_name)]
    draft['seeded_teams'] = rename_seeded_team(draft['seeded_teams'], team_id, new_name)
    save_draft(draft)
    return _state_response(draft)


@app.route('/api/builder/seeds', methods=['POST'])
def api_generate_builder_seeds():
    """AJAX endpoint for generating knockout seeds from the current draft."""
    draft = load_draft()
    try:
        seeded = generate_seeds(_teams(draft), draft['settings'])
    except InsufficientTeamsError as e:
        return jsonify({'success': False, 'error': str(e)}), 400

    draft['seeded_teams'] = seeded
    save_draft(draft)
    app.logger.info(f'Generated {len(seeded)} seeds for {draft["settings"]["tournament_name"]}')
    return _state_response(draft, message='Seeds generated.')


@app.route('/api/builder/save', methods=['POST'])
def api_save_builder_draft():
    """Log a snapshot of the current draft. Nothing is written to disk."""
    draft = load_draft()
    settings = draft['settings']
    snapshot = {
        'name': settings['tournament_name'],
        'participants': settings['participants'],
        'group_stage': settings['use_group_stage'],
        'group_count': settings['group_count'],
        'promotion_per_group': settings['promotion_per_group'],
        'formats': {
            'base': settings['base_format'],
            'semifinal': settings['semifinal_format'],
            'final': settings['final_format'],
        },
        'seeded_teams': draft['seeded_teams'],
    }
    app.logger.info(f'Tournament draft saved: {snapshot}')
    return jsonify({'success': True, 'message': 'Draft saved.', 'draft': snapshot})


@app.route('/api/builder/reset', methods=['POST'])
def api_reset_builder():
    """Drop the current draft and start again from defaults."""
    session.pop(DRAFT_KEY, None)
    return _state_response(load_draft())


if __name__ == '__main__':
    app.run(debug=True)
