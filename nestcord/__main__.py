from nestcord.cli import main

main()
