from utklipp.cli import main

main()
