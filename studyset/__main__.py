from studyset.cli import main

main()
