import logging

import click
from flask import Flask
from flask_cors import CORS
from flask_login import LoginManager
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

from config import Config

db = SQLAlchemy()
login_manager = LoginManager()
migrate = Migrate()


def create_app(config_class=Config, store=None, verifier=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(getattr(logging, str(flask_app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO))

    db.init_app(flask_app)
    login_manager.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=flask_app.config.get('ALLOWED_ORIGINS', []))

    # Authentication gate: Authorization header -> verifier -> AuthUser
    from scorecard.auth import init_auth
    init_auth(flask_app, verifier)

    # Document store and the game service that owns it
    import scorecard.models  # noqa: F401
    from scorecard.store import SQLAlchemyGameStore
    from scorecard.services.games.lifecycle import GameService
    if store is None:
        store = SQLAlchemyGameStore(db.session)
    flask_app.extensions['game_service'] = GameService(
        store,
        enforce_ownership=flask_app.config.get('ENFORCE_GAME_OWNERSHIP', False),
    )

    from scorecard.errors import register_error_handlers
    register_error_handlers(flask_app)

    from scorecard.main import main
    flask_app.register_blueprint(main)

    from scorecard.api.games import games
    flask_app.register_blueprint(games, url_prefix='/games')

    @click.command('db-reset')
    @click.option('--demo-uid', default=None, help='Seed a sample 9-hole game owned by this uid.')
    def db_reset_command(demo_uid):
        """Drops and recreates the database, optionally seeding a demo game."""
        with flask_app.app_context():
            db.drop_all()
            db.create_all()

            if demo_uid:
                from scorecard.auth import AuthUser
                service = flask_app.extensions['game_service']
                game_id = service.create_game(AuthUser(uid=demo_uid), {
                    'title': 'Demo round',
                    'numberHoles': 9,
                    'players': [{'name': 'Alice'}, {'name': 'Bob'}],
                })
                click.echo(f'Seeded demo game {game_id} for {demo_uid}')

            click.echo('Database has been reset!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
