"""Web Server Gateway Interface entry-point."""

from advising_portal.app_factory import create_app

application = create_app()


def main():
    application.run(port=application.config['PORT'])


if __name__ == '__main__':
    main()
