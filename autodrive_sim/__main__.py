from autodrive_sim.cli import main

main()
