#This file actually runs the contact simulation

from contactsim.simulation.runner import main

if __name__ == "__main__":
    main()
