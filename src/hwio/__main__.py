from hwio.cli import main

main()
