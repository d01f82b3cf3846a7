from boxplot.boxplot import main

main()
