from userauth.app import main

main()
