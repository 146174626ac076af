from demo_server.server import main

main()
