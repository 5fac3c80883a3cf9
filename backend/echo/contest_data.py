"""Static contest content.

``CONTEST_TEMPLATES`` is the seed set: one entry per historical contest, and
the pool that later contests cycle through. ``DISCUSSIONS`` holds the
community threads shown for the seeded contests.
"""

from __future__ import annotations
from typing import Any, Dict, List


def _q(question: str, options: List[str], answer: str, explanation: str) -> Dict[str, Any]:
	return {"question": question, "options": options, "answer": answer, "explanation": explanation}


def _speaking(topic: str, description: str, min_sec: int = 30, max_sec: int = 120) -> Dict[str, Any]:
	return {"topic": topic, "description": description, "minDurationSec": min_sec, "maxDurationSec": max_sec}


def _reading(title: str, text: str) -> Dict[str, Any]:
	text = " ".join(text.split())
	return {"title": title, "text": text, "wordCount": len(text.split())}


CONTEST_TEMPLATES: List[Dict[str, Any]] = [
	{
		"grammarQuestions": [
			_q("She ___ to school every day.", ["go", "goes", "going", "gone"], "goes", "Third person singular takes -s in the present simple."),
			_q("I have lived here ___ 2015.", ["for", "since", "from", "during"], "since", "Use 'since' with a point in time."),
			_q("If it rains, we ___ at home.", ["stay", "will stay", "would stay", "stayed"], "will stay", "First conditional: if + present, will + verb."),
			_q("He is ___ honest man.", ["a", "an", "the", "no article"], "an", "'Honest' starts with a vowel sound."),
			_q("They ___ football when it started to rain.", ["played", "were playing", "play", "have played"], "were playing", "Past continuous for an action interrupted by another."),
			_q("This is the ___ book I have ever read.", ["good", "better", "best", "most good"], "best", "Superlative of 'good' is 'best'."),
			_q("We are looking forward to ___ you.", ["see", "seeing", "saw", "seen"], "seeing", "'Look forward to' is followed by a gerund."),
			_q("Neither the teacher nor the students ___ ready.", ["was", "were", "is", "be"], "were", "The verb agrees with the nearer subject."),
			_q("She asked me where I ___.", ["live", "lived", "am living", "do live"], "lived", "Reported questions shift the tense back."),
			_q("The letter ___ yesterday.", ["was sent", "sent", "is sent", "has sent"], "was sent", "Past simple passive."),
		],
		"speakingTopic": _speaking("My Favourite Place", "Describe a place you love to visit and explain why it matters to you."),
		"readingParagraph": _reading(
			"The Morning Market",
			"Every Sunday morning the old market square fills with colour. Farmers arrive before sunrise "
			"to arrange baskets of fresh vegetables, bright fruit and warm bread. Children run between the "
			"stalls while their parents chat with neighbours. By noon the square is quiet again, but the "
			"smell of coffee and spices stays in the air until evening.",
		),
	},
	{
		"grammarQuestions": [
			_q("I ___ my homework already.", ["finished", "have finished", "finish", "am finishing"], "have finished", "Present perfect with 'already'."),
			_q("There isn't ___ milk left.", ["some", "any", "many", "a"], "any", "Use 'any' in negative sentences."),
			_q("He runs ___ than his brother.", ["fast", "faster", "fastest", "more fast"], "faster", "Comparative of 'fast' is 'faster'."),
			_q("You ___ wear a seatbelt in the car.", ["must", "might", "can", "would"], "must", "'Must' expresses obligation."),
			_q("The man ___ car was stolen called the police.", ["who", "which", "whose", "whom"], "whose", "'Whose' shows possession."),
			_q("By next year, she ___ her degree.", ["completes", "will have completed", "completed", "has completed"], "will have completed", "Future perfect for an action finished before a future time."),
			_q("I'm not used to ___ up early.", ["get", "getting", "got", "gets"], "getting", "'Be used to' is followed by a gerund."),
			_q("He suggested ___ a taxi.", ["to take", "taking", "take", "took"], "taking", "'Suggest' is followed by a gerund."),
			_q("She is interested ___ art.", ["on", "in", "at", "for"], "in", "'Interested in' is the fixed preposition."),
			_q("If I ___ you, I would apologise.", ["am", "was", "were", "be"], "were", "Second conditional uses 'were' for all persons."),
		],
		"speakingTopic": _speaking("A Skill I Want to Learn", "Talk about a skill you would like to learn and how you would go about learning it."),
		"readingParagraph": _reading(
			"Learning to Swim",
			"Many adults never learned to swim as children. It can feel embarrassing to start later in life, "
			"but swimming teachers say that adults often learn faster because they understand instructions "
			"and can practise with purpose. The first step is simply to feel comfortable in the water. "
			"After that, breathing and floating come naturally with patience.",
		),
	},
	{
		"grammarQuestions": [
			_q("How ___ sugar do you need?", ["many", "much", "few", "little"], "much", "'Much' is used with uncountable nouns."),
			_q("She ___ to Paris three times.", ["went", "has been", "goes", "was"], "has been", "Present perfect for life experience."),
			_q("I wish I ___ more time.", ["have", "had", "will have", "having"], "had", "'Wish' about the present takes the past simple."),
			_q("The film was so ___ that I fell asleep.", ["bored", "boring", "bore", "bores"], "boring", "-ing adjectives describe the cause of a feeling."),
			_q("He ___ be at home; his car is outside.", ["must", "can't", "mustn't", "shouldn't"], "must", "'Must' for logical certainty."),
			_q("Let's meet ___ Monday.", ["in", "at", "on", "by"], "on", "Use 'on' with days."),
			_q("I'd rather you ___ smoke here.", ["don't", "didn't", "won't", "not"], "didn't", "'Would rather' + subject takes the past simple."),
			_q("The children ___ by their grandmother.", ["were raised", "raised", "are raising", "have raised"], "were raised", "Passive voice in the past."),
			_q("It's time we ___ home.", ["go", "went", "going", "gone"], "went", "'It's time' + subject uses the past simple."),
			_q("She speaks English ___.", ["good", "well", "nice", "goodly"], "well", "'Well' is the adverb of 'good'."),
		],
		"speakingTopic": _speaking("Technology in Daily Life", "Explain how one piece of technology has changed the way you live or study."),
		"readingParagraph": _reading(
			"The Quiet Library",
			"The city library opened its doors more than a hundred years ago. Although many people now read "
			"on screens, the library is busier than ever. Students come to study in silence, families borrow "
			"picture books, and older visitors use the computers to talk with relatives abroad. The building "
			"has changed with the times, yet its purpose remains the same.",
		),
	},
	{
		"grammarQuestions": [
			_q("We ___ dinner when the phone rang.", ["had", "were having", "have", "are having"], "were having", "Past continuous for an interrupted action."),
			_q("This bag is ___ than that one.", ["heavy", "heavier", "heaviest", "more heavy"], "heavier", "Comparative of 'heavy' is 'heavier'."),
			_q("I don't know ___ he will come.", ["if", "that", "what", "which"], "if", "Use 'if' or 'whether' for yes/no indirect questions."),
			_q("You ___ have told me earlier!", ["should", "must", "will", "can"], "should", "'Should have' criticises a past action."),
			_q("She has ___ friends in London.", ["a few", "a little", "much", "less"], "a few", "'A few' is used with countable nouns."),
			_q("He denied ___ the window.", ["to break", "breaking", "break", "broke"], "breaking", "'Deny' is followed by a gerund."),
			_q("The meeting has been ___ until Friday.", ["put off", "put on", "put up", "put out"], "put off", "'Put off' means postpone."),
			_q("Had I known, I ___ helped.", ["would have", "will have", "would", "had"], "would have", "Inverted third conditional."),
			_q("She is the woman ___ I met at the party.", ["which", "whom", "whose", "what"], "whom", "'Whom' is the object relative pronoun for people."),
			_q("Hardly ___ arrived when it began to snow.", ["we had", "had we", "we have", "have we"], "had we", "Inversion after 'hardly'."),
		],
		"speakingTopic": _speaking("A Memorable Journey", "Describe a trip you took and what made it unforgettable."),
		"readingParagraph": _reading(
			"Trains Across the Mountains",
			"The mountain railway was built by hand over twelve difficult years. Workers cut tunnels through "
			"solid rock and built bridges across deep valleys. Today tourists ride the same line to enjoy "
			"views of snowy peaks and green lakes. The journey is slow, but most passengers agree that the "
			"scenery is worth every minute.",
		),
	},
	{
		"grammarQuestions": [
			_q("My sister ___ a doctor.", ["is", "are", "am", "be"], "is", "Singular subject takes 'is'."),
			_q("I ___ him since we were children.", ["know", "have known", "knew", "am knowing"], "have known", "Present perfect with 'since' for a continuing state."),
			_q("Don't forget ___ the lights.", ["turning off", "to turn off", "turn off", "turned off"], "to turn off", "'Forget to' refers to a future duty."),
			_q("The exam was ___ easier than I expected.", ["much", "many", "very", "more"], "much", "'Much' intensifies comparatives."),
			_q("He ___ have left already; his coat is gone.", ["might", "should", "mustn't", "ought"], "might", "'Might have' for past possibility."),
			_q("The house ___ is being painted.", ["at the moment", "yesterday", "last week", "tomorrow"], "at the moment", "Present continuous passive for now."),
			_q("We arrived ___ the airport late.", ["to", "at", "in", "on"], "at", "'Arrive at' for a specific place."),
			_q("She made me ___ the dishes.", ["wash", "to wash", "washing", "washed"], "wash", "'Make someone do' takes the bare infinitive."),
			_q("Unless you hurry, you ___ the bus.", ["miss", "will miss", "missed", "would miss"], "will miss", "'Unless' follows first-conditional patterns."),
			_q("___ the rain, we went for a walk.", ["Although", "Despite", "However", "Because"], "Despite", "'Despite' is followed by a noun."),
		],
		"speakingTopic": _speaking("Friendship", "What makes someone a good friend? Give examples from your own life."),
		"readingParagraph": _reading(
			"The Community Garden",
			"An empty lot at the end of our street became a garden last spring. Neighbours who had never "
			"spoken before began working side by side, planting tomatoes, herbs and sunflowers. On weekends "
			"they share tools, recipes and stories. The garden now feeds several families and has turned "
			"strangers into friends.",
		),
	},
	{
		"grammarQuestions": [
			_q("There ___ many people at the concert.", ["was", "were", "is", "has"], "were", "Plural subject takes 'were'."),
			_q("I'll call you when I ___ home.", ["get", "will get", "got", "getting"], "get", "Present simple after time conjunctions for the future."),
			_q("She apologised ___ being late.", ["for", "of", "about", "to"], "for", "'Apologise for' is the fixed preposition."),
			_q("The more you practise, the ___ you get.", ["good", "better", "best", "more good"], "better", "Double comparative structure."),
			_q("He can't afford ___ a new car.", ["buying", "to buy", "buy", "bought"], "to buy", "'Afford' is followed by the infinitive."),
			_q("By the time we arrived, the film ___.", ["started", "had started", "has started", "starts"], "had started", "Past perfect for an earlier past action."),
			_q("She's ___ person I know.", ["the kindest", "kinder", "the most kind", "kind"], "the kindest", "Superlative of 'kind'."),
			_q("I would have come if you ___ me.", ["asked", "had asked", "have asked", "ask"], "had asked", "Third conditional uses past perfect in the if-clause."),
			_q("Is this the house ___ you grew up?", ["which", "where", "who", "when"], "where", "'Where' for places in relative clauses."),
			_q("He's been working here ___ three years.", ["since", "for", "during", "ago"], "for", "Use 'for' with a period of time."),
		],
		"speakingTopic": _speaking("A Book or Film That Inspired You", "Talk about a book or film that changed how you think and explain why."),
		"readingParagraph": _reading(
			"The Night Sky",
			"Far from city lights the night sky looks completely different. Thousands of stars appear, and "
			"on clear nights you can even see the pale band of the Milky Way. Astronomers encourage people "
			"to spend time in dark places, not only to study the stars but also to feel how small and "
			"connected we are.",
		),
	},
	{
		"grammarQuestions": [
			_q("Could you tell me what time ___?", ["is it", "it is", "it's being", "does it"], "it is", "Indirect questions use statement word order."),
			_q("They ___ married for ten years.", ["are", "have been", "were being", "had"], "have been", "Present perfect for a state up to now."),
			_q("I need ___ water.", ["a", "some", "many", "few"], "some", "'Some' with uncountable nouns in positive sentences."),
			_q("You'd better ___ a coat.", ["take", "to take", "taking", "took"], "take", "'Had better' takes the bare infinitive."),
			_q("She's good ___ languages.", ["in", "at", "on", "with"], "at", "'Good at' is the fixed preposition."),
			_q("The bridge ___ next year.", ["will build", "will be built", "builds", "is building"], "will be built", "Future simple passive."),
			_q("I stopped ___ coffee last year.", ["drinking", "to drink", "drink", "drank"], "drinking", "'Stop + gerund' means quit an activity."),
			_q("No sooner had he left ___ it started raining.", ["when", "than", "then", "that"], "than", "'No sooner ... than' is a fixed pair."),
			_q("This is ___ interesting story.", ["a", "an", "the", "some"], "an", "'Interesting' starts with a vowel sound."),
			_q("She ___ the piano since she was five.", ["plays", "has played", "played", "is playing"], "has played", "Present perfect with 'since'."),
		],
		"speakingTopic": _speaking("Healthy Habits", "Describe one healthy habit you have and how it helps you."),
		"readingParagraph": _reading(
			"Bicycles in the City",
			"More and more cities are building safe lanes for bicycles. Riding to work is cheap, quiet and "
			"good for the body. Shop owners were worried at first that fewer cars would mean fewer customers, "
			"but many now report the opposite. People on bicycles stop more often and spend more time in "
			"local shops.",
		),
	},
	{
		"grammarQuestions": [
			_q("He ___ TV every evening.", ["watch", "watches", "watching", "watched"], "watches", "Present simple for habits, third person -es."),
			_q("I've never ___ such a beautiful view.", ["see", "saw", "seen", "seeing"], "seen", "Present perfect uses the past participle."),
			_q("Would you mind ___ the door?", ["open", "to open", "opening", "opened"], "opening", "'Would you mind' is followed by a gerund."),
			_q("It's the ___ day of the year.", ["hot", "hotter", "hottest", "most hot"], "hottest", "Superlative of 'hot'."),
			_q("She has lived abroad, ___ she?", ["hasn't", "doesn't", "isn't", "didn't"], "hasn't", "Tag question matches the auxiliary 'has'."),
			_q("The report must ___ by Monday.", ["finish", "be finished", "finished", "finishing"], "be finished", "Modal passive: must be + past participle."),
			_q("I'm afraid ___ spiders.", ["from", "of", "about", "with"], "of", "'Afraid of' is the fixed preposition."),
			_q("If he had studied, he ___ the exam.", ["would pass", "would have passed", "will pass", "passed"], "would have passed", "Third conditional result clause."),
			_q("The people ___ live next door are very kind.", ["which", "who", "whose", "what"], "who", "'Who' for people as subject."),
			_q("I'll wait here ___ you come back.", ["until", "by", "since", "during"], "until", "'Until' marks the end of a waiting period."),
		],
		"speakingTopic": _speaking("Your Hometown", "Introduce your hometown to a visitor and suggest what they should see."),
		"readingParagraph": _reading(
			"Rain on the Roof",
			"Some people find the sound of rain on the roof relaxing. Scientists believe this is because the "
			"steady noise covers sudden sounds that might otherwise wake or disturb us. Many apps now play "
			"recorded rain to help people sleep, study or simply calm down after a long day at work.",
		),
	},
]


DISCUSSIONS: List[Dict[str, Any]] = [
	{"contestNumber": 1, "userName": "Aarav", "comment": "Question 7 caught me out, I always forget 'look forward to' takes -ing.", "likes": 12, "minutesAfterEnd": 40},
	{"contestNumber": 1, "userName": "Meera", "comment": "The market passage was lovely to read aloud.", "likes": 7, "minutesAfterEnd": 65},
	{"contestNumber": 2, "userName": "Rohan", "comment": "Speaking about a new skill was easier once I planned three points.", "likes": 9, "minutesAfterEnd": 30},
	{"contestNumber": 2, "userName": "Isha", "comment": "Second conditional with 'were' again! Good practice.", "likes": 5, "minutesAfterEnd": 82},
	{"contestNumber": 3, "userName": "Kabir", "comment": "The 'would rather you didn't' question was tricky.", "likes": 14, "minutesAfterEnd": 50},
	{"contestNumber": 4, "userName": "Ananya", "comment": "Inversion after 'hardly' is my new favourite structure.", "likes": 8, "minutesAfterEnd": 25},
	{"contestNumber": 4, "userName": "Dev", "comment": "Loved the mountain railway passage.", "likes": 3, "minutesAfterEnd": 70},
	{"contestNumber": 5, "userName": "Priya", "comment": "Talking about friendship felt natural, I easily passed fifty words.", "likes": 6, "minutesAfterEnd": 35},
	{"contestNumber": 6, "userName": "Vikram", "comment": "The double comparative question was a nice change.", "likes": 4, "minutesAfterEnd": 60},
	{"contestNumber": 7, "userName": "Sara", "comment": "The bicycle passage had some long sentences, read slowly!", "likes": 10, "minutesAfterEnd": 45},
	{"contestNumber": 8, "userName": "Neil", "comment": "Tag questions are easy points if you check the auxiliary.", "likes": 2, "minutesAfterEnd": 55},
]
