from gittracker.cli import main

main()
