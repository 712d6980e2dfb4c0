from toukei.cli import main

main()
