from godepgraph.cli import main

main()
