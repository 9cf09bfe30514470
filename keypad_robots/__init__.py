'''
Button presses needed to type door codes through a chain of keypad robots.
'''
