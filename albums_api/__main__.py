from albums_api.cli import main

main()
