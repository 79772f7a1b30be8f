from simview.app.main import main

main()
