"""
Entry point for the WordPress to Strapi migration tool.
"""

from wp_strapi.migration_tool import StrapiMigrationTool
from wp_strapi.utils.pre_flight_checks import PreFlightCheckError, run_pre_flight_checks

CONFIG_FILE = "config/migration_config.json"


def main():
    """
    Main function to run the WordPress to Strapi migration tool.
    """
    tool = StrapiMigrationTool(config_file=CONFIG_FILE)
    tool.log_message("Starting WordPress to Strapi migration.")
    tool.log_message(
        "Ensure Strapi is running and, without STRAPI_TOKEN, that the Public role may "
        "'create' Category, Article, Tour, Page and Upload.",
        level="WARNING" if not tool.config["strapi"]["token"] else "DEBUG",
    )
    tool.log_message(f"Source WordPress API: {tool.config['wordpress']['api_url']}", level="DEBUG")
    tool.log_message(f"Target Strapi API: {tool.config['strapi']['api_url']}", level="DEBUG")

    try:
        run_pre_flight_checks(tool.config, session=tool.session)
    except PreFlightCheckError as e:
        tool.log_message(f"Pre-flight checks failed: {e}", level="ERROR")
        return

    tool.run()

    tool.log_message("Migration process finished.")


if __name__ == "__main__":
    main()
