from polyarea import main

main()
