from robodeck.main import main

main()
