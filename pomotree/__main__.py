from pomotree.interfaces.cli.main import main

main()
