from user_settings.presentation.cli.app import main

main()
