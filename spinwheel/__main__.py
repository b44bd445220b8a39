from spinwheel.gui.window import main

main()
