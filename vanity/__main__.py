from vanity.app.cli import main

main()
