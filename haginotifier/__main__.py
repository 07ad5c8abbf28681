from haginotifier.cli import main

main()
