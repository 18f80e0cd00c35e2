import click
from babystore.extensions import db
from babystore.services.category_service import CategoryService


def register_commands(app):
    """Register CLI commands"""

    @app.cli.command()
    def init_db():
        """Initialize database"""
        db.create_all()
        click.echo('Database initialized successfully!')

    @app.cli.command()
    def drop_db():
        """Drop all tables"""
        if click.prompt('Are you sure you want to drop all tables? (yes/no)') == 'yes':
            db.drop_all()
            click.echo('Database dropped successfully!')
        else:
            click.echo('Operation cancelled')

    @app.cli.command()
    @click.argument('names', nargs=-1, required=True)
    def seed_categories(names):
        """Create one category per NAME"""
        for name in names:
            category = CategoryService.create_category(name=name)
            click.echo(f'Created category {category.id}: {category.name}')
