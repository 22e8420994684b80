"""Posts app: short posts (tweets) and the links they share.

Tweets use ``ActivityMixin``, so creating one publishes an activity to
its author's user feed and to the notification feed of every mentioned
user.
"""
