from .maze import main

main()
