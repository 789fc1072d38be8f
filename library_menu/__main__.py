from library_menu.main import main

main()
