from .scaffold import main

main()
