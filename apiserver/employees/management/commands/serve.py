import logging
import uvicorn
from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError
from django.db import DEFAULT_DB_ALIAS, DatabaseError, connections

logger = logging.getLogger(__name__)

ASGI_APPLICATION = 'apiserver.asgi:application'


class Command(BaseCommand):
    help = 'Connect to the database, apply the schema and serve the employee API'

    def add_arguments(self, parser):
        parser.add_argument('--addr', default='0.0.0.0', help='Address to listen on')
        parser.add_argument('--port', type=int, default=settings.SERVER_PORT, help='Port to listen on')
        parser.add_argument('--workers', type=int, default=settings.SERVER_WORKERS, help='Number of server worker processes')
        parser.add_argument('--database', default=DEFAULT_DB_ALIAS, help='Database alias to bootstrap')
        parser.add_argument('--skip-migrate', action='store_true', help='Do not apply migrations on startup')

    def handle(self, *args, **options):
        database = options['database']

        # 1. The process must not start without a database
        logger.info(f"Connecting to database '{database}'...")
        try:
            connections[database].ensure_connection()
        except DatabaseError as e:
            raise CommandError(f"(error) failed to connect the database cause {e}") from e

        # 2. Schema
        if not options['skip_migrate']:
            logger.info("Applying migrations...")
            try:
                call_command(
                    'migrate',
                    database=database,
                    interactive=False,
                    verbosity=options.get('verbosity', 1),
                )
            except (DatabaseError, CommandError) as e:
                raise CommandError(f"(error) failed to auto migrate into the database cause {e}") from e

        # 3. Listen
        address = f"{options['addr']}:{options['port']}"
        # Requests open their own connections in the server threads
        connections.close_all()
        logger.info(f"Employee API listening on {address}")
        uvicorn.run(
            ASGI_APPLICATION,
            host=options['addr'],
            port=options['port'],
            workers=options['workers'],
            lifespan='off',
            # Django's LOGGING stays in charge of the log output
            log_config=None,
        )
