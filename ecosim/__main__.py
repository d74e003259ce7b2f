from ecosim.main import main

main()
